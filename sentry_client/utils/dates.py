from datetime import datetime, timezone


epoch = datetime(1970, 1, 1, tzinfo=timezone.utc)

# ISO 8601 without fractional seconds or zone designator
TIMESTAMP_FORMAT = '%Y-%m-%dT%H:%M:%S'


def utcnow():
    return datetime.now(timezone.utc)


def to_milliseconds(value):
    """
    Whole milliseconds between the epoch and the timezone-aware ``value``.
    """
    delta = value - epoch
    return (delta.days * 86400 + delta.seconds) * 1000 + \
        delta.microseconds // 1000


def format_timestamp(value):
    return value.astimezone(timezone.utc).strftime(TIMESTAMP_FORMAT)
