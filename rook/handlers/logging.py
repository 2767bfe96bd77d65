"""
rook.handlers.logging
~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
import logging
import sys
import traceback

from rook.base import Client
from rook.events import Event, EventHint, level_from_logging
from rook.hub import Hub
from rook.utils.encoding import to_unicode

RESERVED = frozenset((
    'stack', 'name', 'module', 'funcName', 'args', 'msg', 'levelno',
    'exc_text', 'exc_info', 'stack_info', 'data', 'created', 'levelname',
    'msecs', 'relativeCreated', 'tags', 'message', 'lineno', 'pathname',
    'filename', 'thread', 'threadName', 'process', 'processName',
    'taskName',
))

IGNORED_LOGGERS = ('rook',)


class SentryHandler(logging.Handler, object):
    """
    Turns log records into events.

    >>> handler = SentryHandler(client, level=logging.ERROR)
    >>> logging.getLogger().addHandler(handler)
    """

    def __init__(self, target, level=logging.NOTSET):
        if isinstance(target, Client):
            target = Hub(target)
        elif not isinstance(target, Hub):
            raise ValueError(
                'The first argument to %s must be either a Client or a Hub '
                'instance, got %r instead.' % (self.__class__.__name__, target))
        self.hub = target

        logging.Handler.__init__(self, level=level)

    @property
    def client(self):
        return self.hub.client

    def can_record(self, record):
        return not any(
            record.name == name or record.name.startswith(name + '.')
            for name in IGNORED_LOGGERS
        )

    def emit(self, record):
        try:
            self.format(record)

            # Avoid feedback loops through our own loggers
            if not self.can_record(record):
                print(to_unicode(record.message), file=sys.stderr)
                return

            return self._emit(record)
        except Exception:
            print("Top level rook exception caught - failed creating log record", file=sys.stderr)
            print(to_unicode(record.msg), file=sys.stderr)
            print(to_unicode(traceback.format_exc()), file=sys.stderr)

    def _emit(self, record):
        extra = getattr(record, 'data', None)
        if not isinstance(extra, dict):
            if extra:
                extra = {'data': extra}
            else:
                extra = {}

        for k, v in vars(record).items():
            if k in RESERVED or k.startswith('_'):
                continue
            extra[k] = v

        tags = dict(getattr(record, 'tags', None) or {})

        event = Event(
            message=record.message,
            level=level_from_logging(record.levelno),
            logger=record.name,
            tags=tags,
            extra=extra,
            timestamp=int(record.created),
        )

        # If there's no exception being processed, exc_info may be a 3-tuple of None
        original_exception = None
        if record.exc_info and all(record.exc_info):
            original_exception = record.exc_info[1]

        self.hub.capture_event(event, hint=EventHint(
            original_exception=original_exception,
            data={'log_record': record},
        ))
