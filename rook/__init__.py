"""
rook
~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

__all__ = ('VERSION', 'Client', 'ClientOptions', 'Dsn', 'Event', 'EventHint',
           'Hub', 'Integration', 'Scope')

VERSION = '0.1.0'

from rook.base import *  # NOQA
from rook.conf import *  # NOQA
from rook.conf.remote import Dsn  # NOQA
from rook.events import Event, EventHint  # NOQA
from rook.hub import Hub  # NOQA
from rook.integrations import Integration  # NOQA
from rook.scope import Scope  # NOQA
