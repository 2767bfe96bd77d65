"""
rook.base
~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
import contextvars
import logging
import random
import sys
import time
import uuid
from contextlib import contextmanager

import rook
from rook.conf import ClientOptions, defaults
from rook.conf.remote import Dsn
from rook.events import Event, EventHint, SdkInfo, SdkPackage, LEVEL_INFO
from rook.exceptions import (
    DroppedByBeforeSend, DroppedByProcessor, EventDropped, SampledOut)
from rook.hub import Hub, get_hub_from_context, has_hub_on_context
from rook.integrations import setup_integrations
from rook.scope import Scope
from rook.transport.http import HTTPTransport
from rook.utils.encoding import exception_message, to_unicode

__all__ = ('Client',)

# Always written over the event's transaction. This is a placeholder, not
# a real transaction name.
TRANSACTION_PLACEHOLDER = "Don't sneak into my computer please"

DEBUG_FORMAT = '[rook] %(asctime)s %(message)s'


def make_debug_logger(options):
    """
    Returns the logger used as the client's debug channel.

    An injected ``options.logger`` is used as is. Otherwise a private logger,
    which is not registered with the ``logging`` module and therefore
    never touches global logging state, is created. It discards everything
    unless ``options.debug`` is set.
    """
    if options.logger is not None:
        return options.logger

    logger = logging.Logger('rook.debug')
    if options.debug:
        handler = logging.StreamHandler(options.debug_writer or sys.stdout)
        handler.setFormatter(logging.Formatter(DEBUG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(logging.DEBUG)
    else:
        logger.addHandler(logging.NullHandler())
    return logger


class Client(object):
    """
    The base client, which turns capture calls into events and hands them
    to a transport.

    Will read default configuration from the environment variables
    ``SENTRY_DSN``, ``SENTRY_RELEASE`` and ``SENTRY_ENVIRONMENT`` if
    available.

    >>> from rook import Client

    >>> # Read configuration from ``os.environ['SENTRY_DSN']``
    >>> client = Client()

    >>> # Specify a DSN explicitly
    >>> client = Client(dsn='https://public_key@sentry.local/project_id')

    >>> # Record an exception
    >>> try:
    >>>     1/0
    >>> except ZeroDivisionError:
    >>>     client.capture_exception()
    """

    def __init__(self, options=None, **kwargs):
        if options is None:
            options = ClientOptions(**kwargs)
        elif kwargs:
            raise TypeError('Pass either a ClientOptions instance or keyword '
                            'options, not both')

        options = options.with_environment()

        self.logger = make_debug_logger(options)

        # an invalid DSN is fatal, an empty one is not
        self.dsn = Dsn.from_string(options.dsn)
        if self.dsn is None:
            self.logger.debug('Client initialized with an empty DSN')
        else:
            self.logger.debug('Configuring client for host: %s', self.dsn.base_url)

        self.options = options
        self.random = random.Random()
        self.transport = self.setup_transport()
        self.integrations = setup_integrations(options.integrations, self.logger)

    def __repr__(self):
        return '<%s: %r>' % (type(self).__name__, self.dsn)

    def setup_transport(self):
        transport = self.options.transport
        if transport is None:
            transport = HTTPTransport()

        transport.configure(self.options)
        return transport

    def list_integrations(self):
        if not self.integrations:
            return []
        return sorted(self.integrations)

    def capture_message(self, message, hint=None, scope=None):
        """
        Creates an event from ``message``.

        >>> client.capture_message('My event just happened!')
        """
        event = self.event_from_message(message)
        self.capture_event(event, hint, scope)

    def capture_exception(self, exception=None, hint=None, scope=None):
        """
        Creates an event from an exception.

        >>> try:
        >>>     1/0
        >>> except ZeroDivisionError as e:
        >>>     client.capture_exception(e)

        If ``exception`` is not provided the exception currently being
        handled is used; outside of an ``except`` block this does nothing.
        """
        if exception is None:
            exception = sys.exc_info()[1]
            if exception is None:
                return

        if hint is None:
            hint = EventHint(original_exception=exception)

        event = self.event_from_exception(exception)
        self.capture_event(event, hint, scope)

    def capture_event(self, event, hint=None, scope=None):
        """
        Runs ``event`` through the pipeline. Nothing is returned and nothing
        is raised: drops and delivery failures only end up in the debug log.
        """
        try:
            self.process_event(event, hint, scope)
        except EventDropped as e:
            self.logger.debug('%s', e)
        except Exception as e:
            self.logger.debug('Failed to send event: %s', e, exc_info=True)

    def event_from_message(self, message):
        return Event(message=to_unicode(message))

    def event_from_exception(self, exception):
        return Event(message=exception_message(exception))

    def process_event(self, event, hint=None, scope=None):
        options = self.options

        # a rate of exactly 0.0 disables sampling
        if options.sample_rate != 0.0:
            if self.random.random() > options.sample_rate:
                raise SampledOut(event)

        event = self.prepare_event(event, hint, scope)
        if event is None:
            raise DroppedByProcessor()

        if options.before_send is not None:
            if hint is None:
                hint = EventHint()
            event = options.before_send(event, hint)
            if event is None:
                raise DroppedByBeforeSend()

        return self.transport.send_event(event)

    def prepare_event(self, event, hint=None, scope=None):
        options = self.options

        if not event.event_id:
            event.event_id = uuid.uuid4().hex

        if not event.timestamp:
            event.timestamp = int(time.time())

        if not event.level:
            event.level = LEVEL_INFO

        if not event.server_name:
            event.server_name = options.server_name or defaults.get_hostname() or ''

        if not event.release:
            event.release = options.release
        if not event.dist:
            event.dist = options.dist
        if not event.environment:
            event.environment = options.environment

        event.sdk = SdkInfo(
            name=defaults.SDK_NAME,
            version=rook.VERSION,
            integrations=self.list_integrations(),
            packages=[SdkPackage(defaults.SDK_PACKAGE, rook.VERSION)],
        )
        event.platform = defaults.PLATFORM_NAME
        event.transaction = TRANSACTION_PLACEHOLDER

        if scope is None:
            scope = Scope()
        return scope.apply_to_event(event, hint)

    def recover(self, recovered=None, scope=None):
        """
        Captures ``recovered``, or the exception currently being handled.

        Exceptions are captured as exception events and strings as message
        events. Values of any other type are ignored.

        >>> try:
        >>>     run_job()
        >>> except Exception:
        >>>     client.recover()
        """
        if recovered is None:
            recovered = sys.exc_info()[1]

        self._dispatch_recovered(Hub(self, scope), recovered, None)

    def recover_with_context(self, context=None, recovered=None, scope=None):
        """
        Like ``recover``, but prefers the hub bound to ``context`` (a
        ``contextvars.Context``, defaulting to a copy of the current one)
        over this client and ``scope``.
        """
        if recovered is None:
            recovered = sys.exc_info()[1]

        if recovered is None:
            return

        if context is None:
            context = contextvars.copy_context()

        if has_hub_on_context(context):
            hub = get_hub_from_context(context)
        else:
            hub = Hub(self, scope)

        self._dispatch_recovered(hub, recovered, context)

    def _dispatch_recovered(self, hub, recovered, context):
        if isinstance(recovered, BaseException):
            hub.capture_exception(recovered, hint=EventHint(
                context=context,
                original_exception=recovered,
                recovered_value=recovered,
            ))
        elif isinstance(recovered, str):
            hub.capture_message(recovered, hint=EventHint(
                context=context,
                recovered_value=recovered,
            ))

    @contextmanager
    def recovery(self, scope=None, context=None, reraise=True):
        """
        Marks a recovery boundary: an exception escaping the block is
        captured, then re-raised unless ``reraise`` is false.

        >>> with client.recovery():
        >>>     1/0
        """
        try:
            yield
        except Exception as e:
            if context is not None:
                self.recover_with_context(context, e, scope)
            else:
                self.recover(e, scope)
            if reraise:
                raise
