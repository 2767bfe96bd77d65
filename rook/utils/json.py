"""
rook.utils.json
~~~~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
import collections.abc
import datetime
import json
import uuid


class BetterJSONEncoder(json.JSONEncoder):
    ENCODER_BY_TYPE = {
        uuid.UUID: lambda o: o.hex,
        datetime.datetime: lambda o: o.strftime('%Y-%m-%dT%H:%M:%SZ'),
        set: list,
        frozenset: list,
        bytes: lambda o: o.decode('utf-8', errors='replace')
    }

    def encode(self, obj):
        super_encode = super(BetterJSONEncoder, self).encode
        try:
            return super_encode(obj)
        except TypeError:
            # non-string keys make the C encoder bail out before ``default``
            # is consulted, so massage the data and try again
            return super_encode(self.encode_keys(obj))

    def encode_keys(self, value):
        if isinstance(value, collections.abc.Mapping):
            return dict((self.encode_keys(key), val)
                        for key, val in value.items())
        elif isinstance(value, frozenset):
            return repr(value)
        else:
            try:
                return self.default(value)
            except TypeError:
                return repr(value)

    def default(self, obj):
        if hasattr(obj, 'to_dict'):
            return obj.to_dict()
        try:
            encoder = self.ENCODER_BY_TYPE[type(obj)]
        except KeyError:
            try:
                return super(BetterJSONEncoder, self).default(obj)
            except TypeError:
                return repr(obj)
        return encoder(obj)


def dumps(value, **kwargs):
    return json.dumps(value, cls=BetterJSONEncoder, **kwargs)


def loads(value, **kwargs):
    return json.loads(value, **kwargs)
