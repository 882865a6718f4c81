"""
sentry_client.events
~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2017 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
import enum
from collections import namedtuple
from types import MappingProxyType

import sentry_client
from sentry_client.conf import defaults
from sentry_client.utils.stacks import encode_stack_trace

__all__ = ('CapturedException', 'DEFAULT_FINGERPRINT', 'Event',
           'SeverityLevel')

# Refers to the server's default fingerprinting algorithm. Put it in a
# fingerprint next to custom values to supplement the default grouping.
DEFAULT_FINGERPRINT = '{{ default }}'


class SeverityLevel(enum.Enum):
    """
    Severity of the logged ``Event``; the value is the protocol name.
    """
    FATAL = 'fatal'
    ERROR = 'error'
    WARNING = 'warning'
    INFO = 'info'
    DEBUG = 'debug'


class CapturedException(namedtuple('CapturedException', ['type', 'value'])):
    """
    The reported type name and display string of an exception.
    """
    __slots__ = ()

    @classmethod
    def from_exception(cls, exc):
        return cls(type=type(exc).__name__, value=str(exc))

    def to_json(self):
        return {
            'type': self.type,
            'value': self.value,
        }


_EVENT_FIELDS = (
    'logger_name',
    'server_name',
    'release',
    'environment',
    'message',
    'exception',
    'stack_trace',
    'level',
    'culprit',
    'tags',
    'extra',
    'fingerprint',
)


class Event(namedtuple('Event', _EVENT_FIELDS)):
    """
    An event to be reported to Sentry.

    Every attribute is optional; unset attributes are left out of the
    payload.

    - ``exception``: a ``CapturedException`` or any other value, whose
      type name and ``str()`` are reported.
    - ``stack_trace``: a traceback, a formatted traceback string or a list
      of frame records (see ``sentry_client.utils.stacks``).
    - ``level``: a ``SeverityLevel``.
    - ``tags``: string pairs the event can be searched by (read-only).
    - ``extra``: arbitrary JSON-serializable values.
    - ``fingerprint``: values used to group events together, e.g.
      ``[DEFAULT_FINGERPRINT, 'database']``.

    >>> event = Event(message='Disk full', level=SeverityLevel.WARNING)
    >>> event.to_json()['level']
    'warning'
    """
    __slots__ = ()

    def __new__(cls, logger_name=None, server_name=None, release=None,
                environment=None, message=None, exception=None,
                stack_trace=None, level=None, culprit=None, tags=None,
                extra=None, fingerprint=None):
        if exception is not None and \
                not isinstance(exception, CapturedException):
            exception = CapturedException.from_exception(exception)
        if level is not None:
            level = SeverityLevel(level)
        if isinstance(stack_trace, list):
            stack_trace = tuple(stack_trace)

        # read-only copies keep the event independent from the caller
        if tags is not None:
            tags = MappingProxyType(dict(tags))
        if extra is not None:
            extra = MappingProxyType(dict(extra))
        if fingerprint is not None:
            fingerprint = tuple(fingerprint)

        return super(Event, cls).__new__(
            cls, logger_name, server_name, release, environment, message,
            exception, stack_trace, level, culprit, tags, extra, fingerprint)

    def replace(self, **fields):
        return type(self)(**dict(self._asdict(), **fields))

    def to_json(self):
        data = {
            'platform': defaults.PLATFORM,
            'sdk': {
                'name': defaults.SDK_NAME,
                'version': sentry_client.VERSION,
            },
        }

        if self.logger_name is not None:
            data['logger'] = self.logger_name

        if self.server_name is not None:
            data['server_name'] = self.server_name

        if self.release is not None:
            data['release'] = self.release

        if self.environment is not None:
            data['environment'] = self.environment

        if self.message is not None:
            data['message'] = self.message

        if self.exception is not None:
            data['exception'] = [self.exception.to_json()]

        if self.stack_trace is not None:
            data['stacktrace'] = {
                'frames': encode_stack_trace(self.stack_trace),
            }

        if self.level is not None:
            data['level'] = self.level.value

        if self.culprit is not None:
            data['culprit'] = self.culprit

        if self.tags:
            data['tags'] = dict(self.tags)

        if self.extra:
            data['extra'] = dict(self.extra)

        if self.fingerprint:
            data['fingerprint'] = list(self.fingerprint)

        return data
