from justdivide.events.bus import EventBus


def test_event_bus_emit_subscribe():
    bus = EventBus()
    received = {}

    def handler(sender, **kwargs):
        received.update(kwargs)

    bus.subscribe("test", handler)
    bus.emit("test", value=42, msg="hello")
    assert received == {"value": 42, "msg": "hello"}


def test_event_bus_emit_without_subscribers_is_noop():
    bus = EventBus()
    bus.emit("nobody_listens", value=1)


def test_event_bus_keeps_lambda_subscribers_alive():
    bus = EventBus()
    calls = []
    bus.subscribe("ping", lambda sender, **k: calls.append(sender))
    bus.emit("ping")
    assert calls == [bus]
