"""Tests for devlog.core.events — EventBus and Event."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from devlog.core.events import ENTRY_ADDED, Event, EventBus


async def test_on_emit_lifecycle():
    bus = EventBus()
    received: list[Event] = []

    def hook(event: Event) -> None:
        received.append(event)

    bus.on("test.event", hook)
    evt = Event(name="test.event", payload={"k": "v"}, source="test")
    await bus.emit(evt)

    assert received == [evt]

    await bus.emit(Event(name="other.event"))

    assert len(received) == 1  # other names do not reach the hook


async def test_async_hooks_are_awaited():
    bus = EventBus()
    received: list[dict] = []

    async def hook(event: Event) -> None:
        received.append(event.payload)

    bus.on(ENTRY_ADDED, hook)
    await bus.emit(Event(name=ENTRY_ADDED, payload={"id": 1}))

    assert received == [{"id": 1}]


async def test_failing_hook_does_not_stop_others():
    bus = EventBus()
    received: list[str] = []

    def broken(event: Event) -> None:
        raise RuntimeError("boom")

    bus.on("x", broken)
    bus.on("x", lambda event: received.append("ok"))
    await bus.emit(Event(name="x"))

    assert received == ["ok"]


def test_event_is_frozen():
    evt = Event(name="x")
    with pytest.raises(FrozenInstanceError):
        evt.name = "y"
