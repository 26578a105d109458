"""Event bus for observing journal activity.

The store and the view controller publish what happened (an entry was
added, a snapshot was loaded, an export was produced) without knowing who
listens. Hooks can be sync or async.

Usage::

    from devlog.core.events import EventBus, Event, ENTRY_ADDED

    bus = EventBus()
    bus.on(ENTRY_ADDED, lambda event: print(event.payload["id"]))
    await bus.emit(Event(name=ENTRY_ADDED, payload={"id": 1}, source="store"))
"""

from __future__ import annotations

import inspect
from collections import defaultdict
from dataclasses import dataclass, field
from time import time
from typing import Any

from loguru import logger

# ---------------------------------------------------------------------------
# Well-known event names
# ---------------------------------------------------------------------------

ENTRY_ADDED = "entry.added"
ENTRY_REMOVED = "entry.removed"
ENTRIES_LOADED = "entries.loaded"
EXPORT_CREATED = "export.created"

# Callable[[Event], None] | Callable[[Event], Awaitable[None]]
Hook = Any


@dataclass(frozen=True)
class Event:
    """An immutable event that flows through the bus."""

    name: str
    payload: dict[str, Any] = field(default_factory=dict)
    timestamp: float = field(default_factory=time)
    source: str = ""


class EventBus:
    """Simple pub/sub event bus supporting sync and async hooks."""

    def __init__(self) -> None:
        self._hooks: dict[str, list[Hook]] = defaultdict(list)

    def on(self, event_name: str, hook: Hook) -> None:
        """Register *hook* for a specific event name."""
        self._hooks[event_name].append(hook)

    async def emit(self, event: Event) -> None:
        """Emit an event, running all matching hooks in registration order.

        A failing hook is logged and skipped; it never aborts the operation
        that emitted the event.
        """
        hooks = list(self._hooks.get(event.name, []))
        for hook in hooks:
            try:
                if inspect.iscoroutinefunction(hook):
                    await hook(event)
                else:
                    hook(event)
            except Exception as exc:
                logger.warning(f"Event hook failed for {event.name}: {exc}")
