"""
sentry_client.transport
~~~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2017 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

from sentry_client.transport.base import Response, Transport  # NOQA
from sentry_client.transport.aiohttp import AIOHTTPTransport  # NOQA
