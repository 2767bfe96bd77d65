"""
rook.transport.base
~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""


class Transport(object):
    """
    All transport implementations need to subclass this class

    ``configure`` receives the client's finalized options once, when the
    client is constructed. ``send_event`` delivers a single prepared event
    and returns whatever the remote end answered with; delivery failures
    are raised.
    """

    def configure(self, options):
        pass

    def send_event(self, event):
        """
        You need to override this to do something with the actual
        event. Usually - this is sending to a server
        """
        raise NotImplementedError


class NoopTransport(Transport):
    "Sends events into an empty void"

    def send_event(self, event):
        return None
