"""
sentry_client.exceptions
~~~~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2017 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""


class MalformedDsn(ValueError):
    """
    Raised when a DSN cannot be decomposed into an endpoint and credentials.
    """


class TransportError(Exception):
    def __init__(self, message, url=None):
        super(TransportError, self).__init__(message)
        self.message = message
        self.url = url

    def __str__(self):
        if self.url:
            return '%s (url: %s)' % (self.message, self.url)
        return self.message
