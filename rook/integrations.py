"""
rook.integrations
~~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

__all__ = ('Integration', 'setup_integrations')


class Integration(object):
    """
    All integrations need to subclass this class

    ``name`` is the unique key the integration is registered under and
    ``setup_once`` is invoked a single time when a client is constructed.
    """
    name = None

    def setup_once(self):
        raise NotImplementedError


def setup_integrations(integrations, logger):
    if integrations is None:
        return None

    installed = {}
    for integration in integrations:
        name = integration.name
        if not isinstance(name, str) or not name:
            raise TypeError(
                'Integration %r must have a non-empty string name, got %r' % (
                    integration, name))
        # later registrations under the same name replace earlier ones
        installed[name] = integration
        integration.setup_once()
        logger.debug('Integration installed: %s', name)
    return installed
