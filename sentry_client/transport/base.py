"""
sentry_client.transport.base
~~~~~~~~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2017 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
from sentry_client.utils import json


class Response(object):
    """
    What a transport hands back for a completed HTTP exchange.

    Header names are matched case-insensitively.
    """

    def __init__(self, status, headers=None, body=b''):
        self.status = status
        self.headers = dict(
            (k.lower(), v) for k, v in (headers or {}).items())
        self.body = body

    def __repr__(self):
        return '<%s: %s>' % (type(self).__name__, self.status)

    def get_header(self, name, default=None):
        return self.headers.get(name.lower(), default)

    def json(self):
        return json.loads(self.body)


class Transport(object):
    """
    All transport implementations need to subclass this class

    You must implement the ``send`` coroutine, which POSTs ``data`` to
    ``url`` and returns a ``Response`` for any HTTP status. Network
    failures should be raised, not turned into a response.
    """

    async def send(self, url, data, headers):
        raise NotImplementedError

    async def close(self):
        pass
