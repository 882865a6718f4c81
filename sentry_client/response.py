"""
sentry_client.response
~~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2017 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
from sentry_client.conf import defaults
from sentry_client.utils.json import JSONDecodeError

__all__ = ('CaptureResult', 'from_response')

ERROR_HEADER = 'x-sentry-error'


class CaptureResult(object):
    """
    The outcome of submitting one event.

    If ``is_successful`` the ``event_id`` attribute holds the ID assigned
    by the server. Otherwise ``error`` describes what went wrong.
    """
    __slots__ = ('is_successful', 'event_id', 'error')

    def __init__(self, is_successful, event_id=None, error=None):
        self.is_successful = is_successful
        self.event_id = event_id
        self.error = error

    @classmethod
    def success(cls, event_id):
        return cls(True, event_id=event_id)

    @classmethod
    def failure(cls, error):
        return cls(False, error=error)

    def __bool__(self):
        return self.is_successful

    def __eq__(self, other):
        if not isinstance(other, CaptureResult):
            return NotImplemented
        return (self.is_successful, self.event_id, self.error) == \
            (other.is_successful, other.event_id, other.error)

    def __ne__(self, other):
        return not self == other

    __hash__ = None

    def __repr__(self):
        if self.is_successful:
            return '<CaptureResult: success event_id=%r>' % (self.event_id,)
        return '<CaptureResult: failure error=%r>' % (self.error,)


def from_response(response, service=defaults.SERVICE_NAME):
    """
    Interprets a transport ``Response`` from the store endpoint.
    """
    if response.status != 200:
        message = '%s responded with HTTP %s' % (service, response.status)
        reason = response.get_header(ERROR_HEADER)
        if reason:
            message += ': %s' % (reason,)
        return CaptureResult.failure(message)

    invalid = '%s returned an invalid response body' % (service,)
    try:
        event_id = response.json()['id']
    except (JSONDecodeError, KeyError, TypeError):
        return CaptureResult.failure(invalid)

    if not isinstance(event_id, str) or not event_id:
        return CaptureResult.failure(invalid)
    return CaptureResult.success(event_id)
