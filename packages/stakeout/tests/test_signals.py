"""Unit tests for SignalBus."""
from __future__ import annotations

from stakeout.signals import SignalBus, make_signal_system


def test_delivered_on_flush_only() -> None:
    bus = SignalBus()
    received = []
    bus.subscribe("sound", lambda name, data: received.append((name, data)))
    bus.publish("sound", clip="gunshot")
    assert received == []
    assert bus.pending() == ["sound"]
    bus.flush()
    assert received == [("sound", {"clip": "gunshot"})]
    assert bus.pending() == []


def test_wildcard_receives_everything() -> None:
    bus = SignalBus()
    received = []
    bus.subscribe("*", lambda name, data: received.append(name))
    bus.publish("flash")
    bus.publish("phase", phase="show")
    bus.flush()
    assert received == ["flash", "phase"]


def test_unsubscribe() -> None:
    bus = SignalBus()
    received = []

    def handler(name: str, data: dict) -> None:
        received.append(name)

    bus.subscribe("flash", handler)
    bus.unsubscribe("flash", handler)
    bus.unsubscribe("missing", handler)
    bus.publish("flash")
    bus.flush()
    assert received == []


def test_publish_during_flush_waits_for_next_flush() -> None:
    bus = SignalBus()
    received = []

    def echo(name: str, data: dict) -> None:
        received.append(name)
        if name == "first":
            bus.publish("second")

    bus.subscribe("*", echo)
    bus.publish("first")
    bus.flush()
    assert received == ["first"]
    bus.flush()
    assert received == ["first", "second"]


def test_clear_drops_queue() -> None:
    bus = SignalBus()
    received = []
    bus.subscribe("flash", lambda name, data: received.append(name))
    bus.publish("flash")
    bus.clear()
    bus.flush()
    assert received == []


def test_signal_system_flushes() -> None:
    bus = SignalBus()
    received = []
    bus.subscribe("flash", lambda name, data: received.append(name))
    bus.publish("flash")
    make_signal_system(bus)(None, None)
    assert received == ["flash"]
