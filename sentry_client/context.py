"""
sentry_client.context
~~~~~~~~~~~~~~~~~~~~~

Environment metadata collected once per process and turned into event tags.

:copyright: (c) 2010-2017 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
from collections import namedtuple
from types import MappingProxyType

__all__ = ('ApplicationMetadata', 'BrowserMetadata', 'CaptureContext',
           'MetadataProvider')


class MetadataProvider(object):
    """
    Base class for metadata sources accepted by ``Client.init``.

    Subclasses map their attributes to tag names in ``tag_names``.
    """
    __slots__ = ()

    tag_names = {}

    def get_tags(self):
        tags = {}
        for attr, tag in self.tag_names.items():
            value = getattr(self, attr)
            if value is not None:
                tags[tag] = str(value)
        return tags


class ApplicationMetadata(MetadataProvider, namedtuple(
        'ApplicationMetadata',
        ['application_id', 'application_name', 'application_version'])):
    __slots__ = ()

    tag_names = {
        'application_id': 'applicationId',
        'application_name': 'applicationName',
        'application_version': 'applicationVersion',
    }

    def __new__(cls, application_id=None, application_name=None,
                application_version=None):
        return super(ApplicationMetadata, cls).__new__(
            cls, application_id, application_name, application_version)


class BrowserMetadata(MetadataProvider, namedtuple(
        'BrowserMetadata',
        ['browser_source', 'browser_string', 'flash_version',
         'screen_orientation', 'screen_resolution', 'tab_id', 'viewport',
         'window_id'])):
    __slots__ = ()

    tag_names = {
        'browser_source': 'browserSource',
        'browser_string': 'browserString',
        'flash_version': 'flashVersion',
        'screen_orientation': 'screenOrientation',
        'screen_resolution': 'screenResolution',
        'tab_id': 'tabId',
        'viewport': 'viewport',
        'window_id': 'windowId',
    }

    def __new__(cls, browser_source=None, browser_string=None,
                flash_version=None, screen_orientation=None,
                screen_resolution=None, tab_id=None, viewport=None,
                window_id=None):
        return super(BrowserMetadata, cls).__new__(
            cls, browser_source, browser_string, flash_version,
            screen_orientation, screen_resolution, tab_id, viewport,
            window_id)


class CaptureContext(object):
    """
    Tags attached to every exception captured under this context.

    Instances are never modified; ``Client.init`` swaps in a new one.

    >>> context = CaptureContext.from_providers([
    >>>     ApplicationMetadata('app-1', 'Dashboard', '2.0.1'),
    >>> ])
    >>> context.tags['applicationName']
    'Dashboard'
    """
    __slots__ = ('_tags',)

    def __init__(self, tags=None):
        self._tags = MappingProxyType(dict(tags or {}))

    @property
    def tags(self):
        return self._tags

    def __repr__(self):
        return '<%s: %s>' % (type(self).__name__, dict(self._tags))

    def __eq__(self, other):
        if not isinstance(other, CaptureContext):
            return NotImplemented
        return self._tags == other._tags

    def __ne__(self, other):
        return not self == other

    __hash__ = None

    @classmethod
    def from_providers(cls, providers):
        tags = {}
        for provider in providers:
            if not isinstance(provider, MetadataProvider):
                raise TypeError(
                    'Expected a MetadataProvider, got %r' % (provider,))
            tags.update(provider.get_tags())
        return cls(tags)
