from cometa.event_bus import EventBus
from cometa.events import EventType, KeyPressEvent, KeyReleasedEvent
from cometa.layer import Layer


class Listener(Layer):
    def __init__(self, name, handles=False):
        super().__init__(name)
        self.handles = handles
        self.seen = []

    def init(self):
        pass

    def update(self):
        pass

    def close(self):
        pass

    def handle_event(self, event):
        self.seen.append(event)
        if self.handles:
            event.set_handled()


def test_notify_reaches_subscribers_in_order():
    bus = EventBus()
    order = []
    a, b = Listener("a"), Listener("b")
    a.handle_event = lambda e: order.append("a")
    b.handle_event = lambda e: order.append("b")
    bus.subscribe(EventType.KEY_PRESS, a)
    bus.subscribe(EventType.KEY_PRESS, b)
    assert bus.notify(KeyPressEvent(1)) is False
    assert order == ["a", "b"]


def test_propagation_stops_when_handled():
    bus = EventBus()
    first = Listener("first", handles=True)
    second = Listener("second")
    bus.subscribe(EventType.KEY_PRESS, first)
    bus.subscribe(EventType.KEY_PRESS, second)
    event = KeyPressEvent(2)
    assert bus.notify(event) is True
    assert first.seen == [event]
    assert second.seen == []


def test_only_matching_type_delivered():
    bus = EventBus()
    layer = Listener("l")
    bus.subscribe(EventType.KEY_RELEASE, layer)
    bus.notify(KeyPressEvent(3))
    release = KeyReleasedEvent(3)
    bus.notify(release)
    assert layer.seen == [release]


def test_already_handled_event_not_delivered():
    bus = EventBus()
    layer = Listener("l")
    bus.subscribe(EventType.KEY_PRESS, layer)
    event = KeyPressEvent(4)
    event.set_handled()
    assert bus.notify(event) is True
    assert layer.seen == []


def test_unsubscribe():
    bus = EventBus()
    layer = Listener("l")
    bus.subscribe(EventType.KEY_PRESS, layer)
    bus.unsubscribe(EventType.KEY_PRESS, layer)
    bus.unsubscribe(EventType.MOUSE_MOVE, layer)
    bus.notify(KeyPressEvent(5))
    assert layer.seen == []


def test_unsubscribe_removes_one_registration():
    bus = EventBus()
    layer = Listener("l")
    bus.subscribe(EventType.KEY_PRESS, layer)
    bus.subscribe(EventType.KEY_PRESS, layer)
    bus.unsubscribe(EventType.KEY_PRESS, layer)
    bus.notify(KeyPressEvent(6))
    assert len(layer.seen) == 1


def test_shared_bus_keeps_subscriptions():
    EventBus.reset_instance()
    try:
        layer = Listener("l", handles=True)
        EventBus.get_instance().subscribe(EventType.KEY_PRESS, layer)
        event = KeyPressEvent(7)
        assert EventBus.get_instance().notify(event) is True
        assert layer.seen == [event]
    finally:
        EventBus.reset_instance()