"""
rook.hub
~~~~~~~~

A hub pairs a client with the scope events should be captured with. Hubs
are passed around explicitly or bound to a ``contextvars`` context so that
code further down the call graph (or a recovery boundary) can find them.

>>> hub = Hub(client)
>>> token = bind_hub(hub)
>>> try:
>>>     handle_request()
>>> finally:
>>>     unbind_hub(token)

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
import contextvars

from rook.breadcrumbs import BreadcrumbHint
from rook.scope import Scope

__all__ = ('Hub', 'bind_hub', 'unbind_hub', 'has_hub_on_context',
           'get_hub_from_context')

_hub_var = contextvars.ContextVar('rook_hub')


class Hub(object):
    def __init__(self, client, scope=None):
        if scope is None:
            scope = Scope()
        self.client = client
        self.scope = scope

    def __repr__(self):
        return '<%s: %r>' % (type(self).__name__, self.client)

    def capture_message(self, message, hint=None):
        self.client.capture_message(message, hint=hint, scope=self.scope)

    def capture_exception(self, exception=None, hint=None):
        self.client.capture_exception(exception, hint=hint, scope=self.scope)

    def capture_event(self, event, hint=None):
        self.client.capture_event(event, hint=hint, scope=self.scope)

    def add_breadcrumb(self, crumb, hint=None):
        options = self.client.options
        if options.max_breadcrumbs <= 0:
            return

        if options.before_breadcrumb is not None:
            if hint is None:
                hint = BreadcrumbHint()
            crumb = options.before_breadcrumb(crumb, hint)
            if crumb is None:
                self.client.logger.debug('breadcrumb dropped due to before_breadcrumb callback')
                return

        self.scope.add_breadcrumb(crumb, limit=options.max_breadcrumbs)


def bind_hub(hub):
    """Binds ``hub`` to the current context and returns the reset token."""
    return _hub_var.set(hub)


def unbind_hub(token):
    _hub_var.reset(token)


def has_hub_on_context(context):
    return _hub_var in context


def get_hub_from_context(context):
    return context.get(_hub_var)
