"""
rook.utils.encoding
~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""


def to_unicode(value):
    if isinstance(value, bytes):
        return value.decode('utf-8', 'replace')
    try:
        return str(value)
    except Exception:  # in some cases __str__ itself blows up
        try:
            return str(repr(type(value)))
        except Exception:
            return '(Error decoding value)'


def exception_message(exception):
    """
    Returns the text describing ``exception``, falling back to the name of
    its class when the exception carries no message.
    """
    message = to_unicode(exception)
    if message:
        return message
    return type(exception).__name__
