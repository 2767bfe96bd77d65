"""
rook.utils.testutils
~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2013 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
from unittest import TestCase as BaseTestCase

import rook
from rook.transport.base import Transport


class TestCase(BaseTestCase):
    pass


class InMemoryTransport(Transport):
    def __init__(self):
        self.events = []
        self.options = None

    def configure(self, options):
        self.options = options

    def send_event(self, event):
        self.events.append(event)
        return event.event_id


class InMemoryClient(rook.Client):
    def __init__(self, **kwargs):
        kwargs.setdefault('transport', InMemoryTransport())
        super(InMemoryClient, self).__init__(**kwargs)

    @property
    def events(self):
        return self.transport.events
