"""
rook.exceptions
~~~~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""


class InvalidDsn(ValueError):
    pass


class APIError(Exception):
    def __init__(self, message, code=0):
        super(APIError, self).__init__(message, code)
        self.code = code
        self.message = message

    def __str__(self):
        return "%s: %s" % (self.message, self.code)


class RateLimited(APIError):
    def __init__(self, message, retry_after=0):
        self.retry_after = retry_after
        super(RateLimited, self).__init__(message, 429)


class EventDropped(Exception):
    """
    Raised by the event pipeline when an event is intentionally not sent.

    These never reach application code; the capture entry points log
    them to the client's debug channel.
    """
    reason = 'event dropped'

    def __init__(self, event=None):
        super(EventDropped, self).__init__(self.reason)
        self.event = event

    def __str__(self):
        return self.reason


class SampledOut(EventDropped):
    reason = 'event dropped due to sample_rate hit'


class DroppedByProcessor(EventDropped):
    reason = 'event dropped by one of the event processors'


class DroppedByBeforeSend(EventDropped):
    reason = 'event dropped due to before_send callback'
