"""
rook.scope
~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
import logging
import threading

from rook.breadcrumbs import BreadcrumbBuffer
from rook.utils import merge_dicts

__all__ = ('Scope',)

logger = logging.getLogger('rook.scope')


class Scope(object):
    """
    Holds data which is applied to every event captured with it, and may
    veto an event entirely through its event processors.

    >>> scope = Scope()
    >>> scope.set_tag('transaction_id', '42')
    >>> client.capture_message('My event just happened!', scope=scope)
    """

    def __init__(self):
        self._lock = threading.RLock()
        self.tags = {}
        self.extra = {}
        self.user = {}
        self.level = None
        self.fingerprint = []
        self.breadcrumbs = BreadcrumbBuffer()
        self.event_processors = []

    def __repr__(self):
        return '<%s: tags=%r extra=%r>' % (type(self).__name__, self.tags, self.extra)

    def set_tag(self, key, value):
        with self._lock:
            self.tags[key] = value

    def set_tags(self, tags):
        with self._lock:
            self.tags.update(tags)

    def set_extra(self, key, value):
        with self._lock:
            self.extra[key] = value

    def set_user(self, user):
        with self._lock:
            self.user = dict(user or {})

    def set_level(self, level):
        with self._lock:
            self.level = level

    def set_fingerprint(self, fingerprint):
        with self._lock:
            self.fingerprint = list(fingerprint or [])

    def add_event_processor(self, processor):
        """
        Registers ``processor(event, hint)``. A processor returning ``None``
        drops the event.
        """
        with self._lock:
            self.event_processors.append(processor)

    def add_breadcrumb(self, crumb, limit=None):
        with self._lock:
            self.breadcrumbs.record(crumb, limit=limit)

    def clear(self):
        with self._lock:
            self.tags = {}
            self.extra = {}
            self.user = {}
            self.level = None
            self.fingerprint = []
            self.breadcrumbs.clear()
            self.event_processors = []

    def clone(self):
        with self._lock:
            scope = Scope()
            scope.tags = dict(self.tags)
            scope.extra = dict(self.extra)
            scope.user = dict(self.user)
            scope.level = self.level
            scope.fingerprint = list(self.fingerprint)
            scope.breadcrumbs = BreadcrumbBuffer(self.breadcrumbs.limit)
            scope.breadcrumbs.buffer = list(self.breadcrumbs.buffer)
            scope.event_processors = list(self.event_processors)
            return scope

    def apply_to_event(self, event, hint=None):
        with self._lock:
            tags = dict(self.tags)
            extra = dict(self.extra)
            user = dict(self.user)
            level = self.level
            fingerprint = list(self.fingerprint)
            crumbs = self.breadcrumbs.get_buffer()
            processors = list(self.event_processors)

        # values set directly on the event win over the scope
        event.tags = merge_dicts(tags, event.tags)
        event.extra = merge_dicts(extra, event.extra)

        if user and not event.user:
            event.user = user
        if fingerprint and not event.fingerprint:
            event.fingerprint = fingerprint
        if level:
            event.level = level
        if crumbs:
            event.breadcrumbs = event.breadcrumbs + crumbs

        for processor in processors:
            event = processor(event, hint)
            if event is None:
                logger.debug('Event dropped by processor %r', processor)
                return None
        return event
