"""
sentry_client
~~~~~~~~~~~~~

:copyright: (c) 2010-2017 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

__all__ = ('VERSION', 'Client', 'load')

VERSION = '1.0.0'

from sentry_client.base import *  # NOQA
from sentry_client.conf import *  # NOQA
from sentry_client.context import (  # NOQA
    ApplicationMetadata, BrowserMetadata, CaptureContext)
from sentry_client.events import (  # NOQA
    CapturedException, DEFAULT_FINGERPRINT, Event, SeverityLevel)
from sentry_client.exceptions import MalformedDsn, TransportError  # NOQA
from sentry_client.response import CaptureResult  # NOQA
