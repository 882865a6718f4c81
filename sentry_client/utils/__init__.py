"""
sentry_client.utils
~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2017 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""


def merge_dicts(*dicts):
    """
    Shallow merge of ``dicts`` into a new dict; later values win.

    >>> merge_dicts({'a': 1, 'b': 2}, {'b': 3, 'c': 4})
    {'a': 1, 'b': 3, 'c': 4}
    """
    out = {}
    for d in dicts:
        if not d:
            continue

        for k, v in d.items():
            out[k] = v
    return out


def get_auth_header(protocol, timestamp, api_key):
    header = [
        ('sentry_version', protocol),
        ('sentry_timestamp', timestamp),
        ('sentry_key', api_key),
    ]
    return 'Sentry %s' % ','.join('%s=%s' % (k, v) for k, v in header)
