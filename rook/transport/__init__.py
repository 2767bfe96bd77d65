"""
rook.transport
~~~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

from rook.transport.base import Transport, NoopTransport  # NOQA
from rook.transport.http import HTTPTransport  # NOQA
from rook.transport.threaded import ThreadedHTTPTransport  # NOQA
