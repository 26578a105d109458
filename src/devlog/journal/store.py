"""EntryStore — the ordered entry collection and its persistence binding.

The in-memory list is the source of truth. Every mutation rewrites the
whole collection as one JSON record in the storage backend; there is no
incremental diffing and no append log.
"""

from __future__ import annotations

import json
from collections.abc import Callable

from loguru import logger

from devlog.core.config import STORAGE_KEY
from devlog.core.events import ENTRIES_LOADED, ENTRY_ADDED, ENTRY_REMOVED, Event, EventBus
from devlog.core.exceptions import NothingToExportError
from devlog.core.storage import StorageBackend

from .dates import format_en_au, now_ms
from .models import Entry


class EntryStore:
    """Ordered journal entries synchronised to a key-value backend.

    Example::

        store = EntryStore(LocalStorage("~/.devlog/storage"))
        await store.load()
        entry = await store.add("Fixed the bug")
        print(store.export_text())
    """

    def __init__(
        self,
        storage: StorageBackend,
        *,
        key: str = STORAGE_KEY,
        clock: Callable[[], int] = now_ms,
        today: Callable[[], str] = format_en_au,
        events: EventBus | None = None,
    ):
        """
        Args:
            storage: Backend holding the snapshot record.
            key: Record key for the snapshot.
            clock: Returns the id for a new entry (milliseconds since epoch).
            today: Returns the localised date string for a new entry.
            events: Optional bus notified after each mutation.
        """
        self.storage = storage
        self.key = key
        self._clock = clock
        self._today = today
        self._events = events
        self._entries: list[Entry] = []

    @property
    def entries(self) -> tuple[Entry, ...]:
        """Current entries, oldest first."""
        return tuple(self._entries)

    def count(self) -> int:
        return len(self._entries)

    def get(self, entry_id: int) -> Entry | None:
        for entry in self._entries:
            if entry.id == entry_id:
                return entry
        return None

    async def load(self) -> list[Entry]:
        """Replace the collection with the persisted snapshot.

        A missing record leaves the collection empty. A record that is not
        a JSON array is discarded with a warning and also yields an empty
        collection. Returns the loaded entries so the caller can render them.
        """
        raw = await self.storage.get(self.key)
        entries = self._parse(raw) if raw is not None else []
        self._entries = entries
        logger.debug(f"Loaded {len(entries)} entries from '{self.key}'")
        await self._emit(ENTRIES_LOADED, {"count": len(entries)})
        return list(entries)

    async def add(self, text: str) -> Entry | None:
        """Append a new entry and persist. Returns None for blank text."""
        text = (text or "").strip()
        if not text:
            return None

        entry = Entry(id=self._clock(), text=text, date=self._today())
        self._entries.append(entry)
        await self.save()
        logger.debug(f"Added entry {entry.id}")
        await self._emit(ENTRY_ADDED, entry.to_record())
        return entry

    async def remove(self, entry_id: int) -> bool:
        """Drop the entry with *entry_id* and persist. Missing ids are a no-op."""
        before = len(self._entries)
        self._entries = [e for e in self._entries if e.id != entry_id]
        removed = len(self._entries) != before
        await self.save()
        if removed:
            logger.debug(f"Removed entry {entry_id}")
            await self._emit(ENTRY_REMOVED, {"id": entry_id})
        return removed

    async def save(self) -> None:
        """Rewrite the full snapshot."""
        await self.storage.save(self.key, self.snapshot())

    def snapshot(self) -> str:
        """Serialise the collection exactly as it is written to storage."""
        return json.dumps([entry.to_record() for entry in self._entries], ensure_ascii=False)

    def export_text(self) -> str:
        """Render every complete entry as ``"[date] text"``, one per line.

        Raises:
            NothingToExportError: If the collection is empty.
        """
        if not self._entries:
            raise NothingToExportError("No entries to download.")
        return "\n".join(entry.formatted for entry in self._entries if entry.exportable)

    @staticmethod
    def _parse(raw: str) -> list[Entry]:
        try:
            data = json.loads(raw)
        except ValueError as e:
            logger.warning(f"Discarding unreadable journal snapshot: {e}")
            return []
        if not isinstance(data, list):
            logger.warning(f"Discarding journal snapshot: expected a list, got {type(data).__name__}")
            return []
        return [Entry.from_record(item) for item in data]

    async def _emit(self, name: str, payload: dict) -> None:
        if self._events is not None:
            await self._events.emit(Event(name=name, payload=payload, source="store"))
