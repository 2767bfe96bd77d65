"""
rook.conf
~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
import os
from collections import namedtuple

from rook.conf import defaults

__all__ = ('ClientOptions',)


_OPTION_DEFAULTS = (
    ('dsn', ''),
    ('debug', False),
    ('debug_writer', None),
    ('logger', None),
    ('sample_rate', defaults.SAMPLE_RATE),
    ('before_send', None),
    ('before_breadcrumb', None),
    ('integrations', None),
    ('transport', None),
    ('server_name', ''),
    ('release', ''),
    ('dist', ''),
    ('environment', ''),
    ('max_breadcrumbs', defaults.MAX_BREADCRUMBS),
)

_ENVIRONMENT_FALLBACKS = (
    ('dsn', defaults.DSN_ENV),
    ('release', defaults.RELEASE_ENV),
    ('environment', defaults.ENVIRONMENT_ENV),
)


class ClientOptions(namedtuple('ClientOptions', [k for k, _ in _OPTION_DEFAULTS])):
    """
    The immutable set of options a client is constructed with.

    >>> options = ClientOptions(dsn='https://public@sentry.local/1',
    >>>                         sample_rate=0.25)
    >>> options.replace(release='1.0').release
    '1.0'
    """
    __slots__ = ()

    def __new__(cls, *args, **kwargs):
        if len(args) > len(cls._fields):
            raise TypeError('ClientOptions takes at most %d positional '
                            'arguments (%d given)' % (len(cls._fields), len(args)))
        for field, value in zip(cls._fields, args):
            if field in kwargs:
                raise TypeError('Got multiple values for client option %r' % (field,))
            kwargs[field] = value

        unknown = set(kwargs) - set(cls._fields)
        if unknown:
            raise TypeError('Unknown client option(s): %s' % (
                ', '.join(sorted(unknown)),))

        values = dict(_OPTION_DEFAULTS)
        values.update(kwargs)

        sample_rate = float(values['sample_rate'] or 0.0)
        if not 0.0 <= sample_rate <= 1.0:
            raise ValueError(
                'sample_rate must be between 0.0 and 1.0, got %r' % (sample_rate,))
        values['sample_rate'] = sample_rate

        if values['integrations'] is not None:
            values['integrations'] = tuple(values['integrations'])

        return super(ClientOptions, cls).__new__(cls, **values)

    def __getnewargs_ex__(self):
        return (), self._asdict()

    @classmethod
    def _make(cls, iterable):
        return cls(*iterable)

    def _replace(self, **kwargs):
        return self.replace(**kwargs)

    __replace__ = _replace

    def replace(self, **kwargs):
        values = self._asdict()
        values.update(kwargs)
        return type(self)(**values)

    def with_environment(self, environ=None):
        """
        Fills the DSN, release and environment from the process environment
        when they were not given explicitly.
        """
        if environ is None:
            environ = os.environ

        updates = {}
        for field, env_name in _ENVIRONMENT_FALLBACKS:
            if not getattr(self, field) and environ.get(env_name):
                updates[field] = environ[env_name]

        if not updates:
            return self
        return self.replace(**updates)
