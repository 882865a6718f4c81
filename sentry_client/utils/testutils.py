"""
sentry_client.utils.testutils
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2017 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
from unittest import TestCase as BaseTestCase

from sentry_client.transport.base import Response, Transport
from sentry_client.utils import json


class TestCase(BaseTestCase):
    pass


class InMemoryTransport(Transport):
    """
    Records every request and answers with a canned response.

    >>> transport = InMemoryTransport(status=400,
    >>>                               headers={'X-Sentry-Error': 'bad key'})
    """

    def __init__(self, status=200, headers=None, body=None, error=None):
        self.requests = []
        self.status = status
        self.headers = headers or {}
        if body is None and status == 200:
            body = b'{"id": "fake-event-id"}'
        self.body = body or b''
        self.error = error
        self.closed = False

    @property
    def events(self):
        return [json.loads(data) for _, data, _ in self.requests]

    async def send(self, url, data, headers):
        self.requests.append((url, data, headers))
        if self.error is not None:
            raise self.error
        return Response(self.status, self.headers, self.body)

    async def close(self):
        self.closed = True
