"""
sentry_client.transport.aiohttp
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2017 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
import asyncio
import ssl

import aiohttp
from aiohttp import ClientError

from sentry_client.conf import defaults
from sentry_client.exceptions import TransportError
from sentry_client.transport.base import Response, Transport


class AIOHTTPTransport(Transport):
    """
    Posts events with a shared ``aiohttp.ClientSession``.

    The session is created on first use so the transport can be built
    outside of a running event loop.
    """

    options = ('timeout', 'verify_ssl', 'ca_certs')

    def __init__(self, timeout=defaults.TIMEOUT, verify_ssl=True,
                 ca_certs=None, session=None):
        if isinstance(timeout, str):
            timeout = float(timeout)
        if isinstance(verify_ssl, str):
            verify_ssl = bool(int(verify_ssl))

        self.timeout = timeout
        self.verify_ssl = verify_ssl
        self.ca_certs = ca_certs
        self._session = session
        self._owns_session = session is None

    def get_ssl_context(self):
        if not self.verify_ssl:
            return False
        if self.ca_certs:
            return ssl.create_default_context(cafile=self.ca_certs)
        return True

    @property
    def session(self):
        if self._session is None:
            self._session = aiohttp.ClientSession(
                connector=aiohttp.TCPConnector(ssl=self.get_ssl_context()),
                timeout=aiohttp.ClientTimeout(total=self.timeout))
        return self._session

    @property
    def closed(self):
        return self._session is None or self._session.closed

    async def send(self, url, data, headers):
        try:
            async with self.session.post(
                    url, data=data, headers=headers) as response:
                body = await response.read()
                return Response(response.status, response.headers, body)
        except asyncio.TimeoutError as e:
            message = ('Connection to Sentry server timed out '
                       '(timeout: %s seconds)' % self.timeout)
            raise TransportError(message, url) from e
        except ClientError as e:
            raise TransportError(
                'Unable to reach Sentry server: %s' % e, url) from e

    async def close(self):
        if self._owns_session and not self.closed:
            await self._session.close()
        self._session = None
