import threading

from rook.breadcrumbs import Breadcrumb, BreadcrumbBuffer
from rook.events import Event, EventHint
from rook.scope import Scope
from rook.utils.testutils import InMemoryClient, TestCase


class ScopeTest(TestCase):
    def test_tags_and_extra(self):
        scope = Scope()
        scope.set_tag('foo', 'bar')
        scope.set_tags({'biz': 'baz'})
        scope.set_extra('key', 'value')

        event = scope.apply_to_event(Event(message='test'))
        assert event.tags == {'foo': 'bar', 'biz': 'baz'}
        assert event.extra == {'key': 'value'}

    def test_event_values_win(self):
        scope = Scope()
        scope.set_tag('foo', 'scope')
        scope.set_tag('other', 'scope')

        event = scope.apply_to_event(Event(message='test', tags={'foo': 'event'}))
        assert event.tags == {'foo': 'event', 'other': 'scope'}

    def test_user_and_fingerprint(self):
        scope = Scope()
        scope.set_user({'id': '1'})
        scope.set_fingerprint(['{{ default }}', 'db'])

        event = scope.apply_to_event(Event(message='test'))
        assert event.user == {'id': '1'}
        assert event.fingerprint == ['{{ default }}', 'db']

        event = scope.apply_to_event(Event(message='test', user={'id': '2'}))
        assert event.user == {'id': '2'}

    def test_level_overrides(self):
        scope = Scope()
        scope.set_level('fatal')
        event = scope.apply_to_event(Event(message='test', level='info'))
        assert event.level == 'fatal'

    def test_breadcrumbs_are_attached(self):
        scope = Scope()
        scope.add_breadcrumb(Breadcrumb(message='one'))
        scope.add_breadcrumb(Breadcrumb(message='two'))

        event = scope.apply_to_event(Event(message='test'))
        assert [c.message for c in event.breadcrumbs] == ['one', 'two']
        assert all(c.timestamp for c in event.breadcrumbs)

    def test_processors_run_in_order(self):
        calls = []
        hint = EventHint()

        def first(event, hint):
            calls.append(('first', hint))
            return event

        def second(event, hint):
            calls.append(('second', hint))
            event.extra['processed'] = True
            return event

        scope = Scope()
        scope.add_event_processor(first)
        scope.add_event_processor(second)

        event = scope.apply_to_event(Event(message='test'), hint)
        assert calls == [('first', hint), ('second', hint)]
        assert event.extra == {'processed': True}

    def test_processor_veto(self):
        calls = []

        def veto(event, hint):
            return None

        def after(event, hint):
            calls.append(event)
            return event

        scope = Scope()
        scope.add_event_processor(veto)
        scope.add_event_processor(after)

        assert scope.apply_to_event(Event(message='test')) is None
        assert calls == []

    def test_clear(self):
        scope = Scope()
        scope.set_tag('foo', 'bar')
        scope.add_breadcrumb(Breadcrumb(message='one'))
        scope.add_event_processor(lambda event, hint: None)
        scope.clear()

        event = scope.apply_to_event(Event(message='test'))
        assert event is not None
        assert event.tags == {}
        assert event.breadcrumbs == []

    def test_clone_is_independent(self):
        scope = Scope()
        scope.set_tag('foo', 'bar')
        scope.add_breadcrumb(Breadcrumb(message='one'))

        clone = scope.clone()
        clone.set_tag('foo', 'baz')
        clone.add_breadcrumb(Breadcrumb(message='two'))

        assert scope.tags == {'foo': 'bar'}
        assert len(scope.breadcrumbs) == 1
        assert len(clone.breadcrumbs) == 2

    def test_concurrent_writes(self):
        scope = Scope()

        def worker(n):
            for i in range(100):
                scope.set_tag('%s-%s' % (n, i), i)

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(scope.tags) == 400

    def test_concurrent_captures(self):
        client = InMemoryClient()
        scope = Scope()
        scope.set_tag('shared', 'yes')

        def worker(n):
            for i in range(50):
                scope.set_extra('%s-%s' % (n, i), i)
                client.capture_message('message %s-%s' % (n, i), scope=scope)

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        events = client.events
        assert len(events) == 200
        assert len(set(e.event_id for e in events)) == 200
        assert len(set(e.message for e in events)) == 200
        assert all(e.tags == {'shared': 'yes'} for e in events)


class BreadcrumbBufferTest(TestCase):
    def test_limit(self):
        buf = BreadcrumbBuffer(limit=2)
        for message in ('one', 'two', 'three'):
            buf.record(Breadcrumb(message=message))
        assert [c.message for c in buf.get_buffer()] == ['two', 'three']

    def test_zero_limit_records_nothing(self):
        buf = BreadcrumbBuffer(limit=0)
        buf.record(Breadcrumb(message='one'))
        assert buf.get_buffer() == []

    def test_requires_message_or_data(self):
        with self.assertRaises(ValueError):
            Breadcrumb(category='foo')
