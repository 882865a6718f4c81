"""
sentry_client.conf.defaults
~~~~~~~~~~~~~~~~~~~~~~~~~~~

Represents the default values for all client settings.

:copyright: (c) 2010-2017 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

# Version of the store protocol spoken by this client
PROTOCOL_VERSION = '7'

# Reported in the ``sdk`` interface of every event
SDK_NAME = 'sentry-client-python'

PLATFORM = 'python'

# Name used in failure messages built from server responses
SERVICE_NAME = 'Sentry'

# Seconds before the HTTP transport gives up on a request
TIMEOUT = 1

# Environment variable consulted when no DSN is passed to the client
DSN_ENV_VAR = 'SENTRY_DSN'
