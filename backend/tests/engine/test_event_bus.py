"""
Tests for propcore.engine.event_bus
"""
from datetime import datetime

from propcore.engine import ALL_EVENTS, Event, EventBus


def _event(event_type="entity.created", **data):
    return Event(event_type=event_type, timestamp=datetime.now(), data=data)


def test_event_creation():
    event = _event(key="value")
    assert event.data == {"key": "value"}
    assert event.source == ""
    assert len(event.event_id) > 0


def test_subscribe_and_publish():
    bus = EventBus()
    received = []
    bus.subscribe("entity.created", received.append)

    result = bus.publish(_event())

    assert len(received) == 1
    assert result.subscriber_count == 1
    assert result.success_count == 1


def test_catch_all_subscriber():
    bus = EventBus()
    received = []
    bus.subscribe(ALL_EVENTS, received.append)
    bus.publish(_event("entity.created"))
    bus.publish(_event("entity.deleted"))
    assert [e.event_type for e in received] == ["entity.created", "entity.deleted"]


def test_duplicate_subscription_ignored():
    bus = EventBus()
    received = []
    bus.subscribe("x", received.append)
    bus.subscribe("x", received.append)
    bus.publish(_event("x"))
    assert len(received) == 1


def test_unsubscribe():
    bus = EventBus()
    received = []
    bus.subscribe("x", received.append)
    bus.unsubscribe("x", received.append)
    bus.publish(_event("x"))
    assert received == []


def test_failing_handler_is_isolated():
    bus = EventBus()
    received = []

    def broken(event):
        raise RuntimeError("boom")

    bus.subscribe("x", broken)
    bus.subscribe("x", received.append)
    result = bus.publish(_event("x"))

    assert len(received) == 1
    assert result.failure_count == 1
    assert result.success_count == 1
    assert bus.get_statistics().total_failed == 1


def test_history_newest_first_and_bounded():
    bus = EventBus(history_size=3)
    for i in range(5):
        bus.publish(_event("x", n=i))
    history = bus.get_history()
    assert [e.data["n"] for e in history] == [4, 3, 2]


def test_history_filter_by_type():
    bus = EventBus()
    bus.publish(_event("a"))
    bus.publish(_event("b"))
    assert [e.event_type for e in bus.get_history(event_type="b")] == ["b"]


def test_clear():
    bus = EventBus()
    bus.subscribe("x", lambda e: None)
    bus.publish(_event("x"))
    bus.clear()
    stats = bus.get_statistics()
    assert stats.total_published == 0
    assert stats.subscriber_count == {}
    assert bus.get_history() == []
