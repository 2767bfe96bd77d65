"""
rook.breadcrumbs
~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
import time

from rook.conf import defaults


class Breadcrumb(object):
    def __init__(self, message=None, category=None, level=None, type=None,
                 data=None, timestamp=None):
        if not (message or data):
            raise ValueError('You must pass either `message` or `data`')
        self.message = message
        self.category = category
        self.level = level
        self.type = type or 'default'
        self.data = data
        self.timestamp = timestamp

    def __repr__(self):
        return '<%s: %s %r>' % (type(self).__name__, self.category, self.message)

    def to_dict(self):
        return {
            'type': self.type,
            'timestamp': self.timestamp,
            'level': self.level,
            'message': self.message,
            'category': self.category,
            'data': self.data,
        }


class BreadcrumbHint(dict):
    pass


class BreadcrumbBuffer(object):

    def __init__(self, limit=defaults.MAX_BREADCRUMBS):
        self.buffer = []
        self.limit = limit

    def __len__(self):
        return len(self.buffer)

    def record(self, crumb, limit=None):
        if limit is None:
            limit = self.limit
        if limit <= 0:
            return
        if crumb.timestamp is None:
            crumb.timestamp = time.time()
        self.buffer.append(crumb)
        del self.buffer[:-limit]

    def clear(self):
        del self.buffer[:]

    def get_buffer(self):
        return list(self.buffer)
