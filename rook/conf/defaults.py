"""
rook.conf.defaults
~~~~~~~~~~~~~~~~~~

Represents the default values for all client settings.

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
import socket

# Environment variables consulted when the matching option is empty
DSN_ENV = 'SENTRY_DSN'
RELEASE_ENV = 'SENTRY_RELEASE'
ENVIRONMENT_ENV = 'SENTRY_ENVIRONMENT'

TIMEOUT = 1

# A sample rate of 0.0 means sampling is disabled, not that every event
# is dropped.
SAMPLE_RATE = 0.0

MAX_BREADCRUMBS = 100

PLATFORM_NAME = 'python'

SDK_NAME = 'rook.python'

SDK_PACKAGE = 'pypi:rook'

PROTOCOL_VERSION = '7'


def get_hostname():
    # Not all environments have access to the socket module, for example
    # Google App Engine
    if not hasattr(socket, 'gethostname'):
        return None
    try:
        return socket.gethostname()
    except socket.error:
        return None
