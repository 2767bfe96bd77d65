"""
rook.events
~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
import logging

__all__ = ('Event', 'EventHint', 'SdkInfo', 'SdkPackage', 'LEVEL_DEBUG',
           'LEVEL_INFO', 'LEVEL_WARNING', 'LEVEL_ERROR', 'LEVEL_FATAL',
           'level_from_logging')

LEVEL_DEBUG = 'debug'
LEVEL_INFO = 'info'
LEVEL_WARNING = 'warning'
LEVEL_ERROR = 'error'
LEVEL_FATAL = 'fatal'

_LOGGING_LEVELS = (
    (logging.CRITICAL, LEVEL_FATAL),
    (logging.ERROR, LEVEL_ERROR),
    (logging.WARNING, LEVEL_WARNING),
    (logging.INFO, LEVEL_INFO),
)


def level_from_logging(levelno):
    for threshold, level in _LOGGING_LEVELS:
        if levelno >= threshold:
            return level
    return LEVEL_DEBUG


class SdkPackage(object):
    def __init__(self, name, version):
        self.name = name
        self.version = version

    def __eq__(self, other):
        return isinstance(other, SdkPackage) and \
            (self.name, self.version) == (other.name, other.version)

    def __ne__(self, other):
        return not self.__eq__(other)

    def __repr__(self):
        return '<%s: %s %s>' % (type(self).__name__, self.name, self.version)

    def to_dict(self):
        return {'name': self.name, 'version': self.version}


class SdkInfo(object):
    def __init__(self, name, version, integrations=None, packages=None):
        self.name = name
        self.version = version
        self.integrations = list(integrations or [])
        self.packages = list(packages or [])

    def to_dict(self):
        return {
            'name': self.name,
            'version': self.version,
            'integrations': list(self.integrations),
            'packages': [p.to_dict() for p in self.packages],
        }


class Event(object):
    """
    A single reportable occurrence. A new instance is built for every
    capture call.

    - event_id: 32 character hex identifier
    - timestamp: seconds since the epoch
    - level: one of ``debug``, ``info``, ``warning``, ``error``, ``fatal``
    """

    def __init__(self, message=None, level=None, event_id=None, timestamp=None,
                 server_name=None, release=None, dist=None, environment=None,
                 tags=None, extra=None, user=None, fingerprint=None,
                 breadcrumbs=None, logger=None):
        self.event_id = event_id or ''
        self.timestamp = timestamp or 0
        self.level = level or ''
        self.message = message or ''
        self.logger = logger or ''
        self.server_name = server_name or ''
        self.release = release or ''
        self.dist = dist or ''
        self.environment = environment or ''
        self.platform = ''
        self.transaction = ''
        self.tags = dict(tags or {})
        self.extra = dict(extra or {})
        self.user = dict(user or {})
        self.fingerprint = list(fingerprint or [])
        self.breadcrumbs = list(breadcrumbs or [])
        self.sdk = None

    def __repr__(self):
        return '<%s: %s %r>' % (type(self).__name__, self.event_id or '-', self.message)

    def to_dict(self):
        data = {
            'event_id': self.event_id,
            'timestamp': self.timestamp,
            'level': self.level,
            'message': self.message,
            'logger': self.logger,
            'server_name': self.server_name,
            'release': self.release,
            'dist': self.dist,
            'environment': self.environment,
            'platform': self.platform,
            'transaction': self.transaction,
            'tags': self.tags,
            'extra': self.extra,
            'user': self.user,
            'fingerprint': self.fingerprint,
            'breadcrumbs': [b.to_dict() for b in self.breadcrumbs],
        }
        if self.sdk is not None:
            data['sdk'] = self.sdk.to_dict()
        # drop everything which has not been set
        return dict((k, v) for k, v in data.items() if v)


class EventHint(object):
    """
    Per-capture context that is handed to scopes and ``before_send`` but
    never sent along with the event.
    """

    def __init__(self, context=None, original_exception=None,
                 recovered_value=None, data=None):
        self.context = context
        self.original_exception = original_exception
        self.recovered_value = recovered_value
        self.data = data
