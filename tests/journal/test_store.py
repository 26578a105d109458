"""Tests for devlog.journal.store (EntryStore)."""

import json

import pytest

from devlog.core.events import ENTRIES_LOADED, ENTRY_ADDED, ENTRY_REMOVED, EventBus
from devlog.core.exceptions import NothingToExportError
from devlog.core.storage import LocalStorage, MemoryStorage
from devlog.journal.models import Entry
from devlog.journal.store import EntryStore

pytestmark = pytest.mark.smoke


class TestAdd:
    async def test_add_increases_count(self, store):
        entry = await store.add("Fixed the bug")
        assert store.count() == 1
        assert entry == Entry(id=1000, text="Fixed the bug", date="17/10/2026")
        assert entry.formatted == "[17/10/2026] Fixed the bug"

    async def test_add_trims_text(self, store):
        entry = await store.add("  padded \n")
        assert entry.text == "padded"

    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    async def test_blank_text_is_ignored(self, store, storage, text):
        assert await store.add(text) is None
        assert store.count() == 0
        assert await storage.get(store.key) is None

    async def test_add_persists_full_snapshot(self, store, storage):
        await store.add("one")
        await store.add("two")
        data = json.loads(await storage.load("devlogEntries"))
        assert data == [
            {"id": 1000, "text": "one", "date": "17/10/2026"},
            {"id": 1001, "text": "two", "date": "17/10/2026"},
        ]

    async def test_insertion_order_kept(self, store):
        for text in ["c", "a", "b"]:
            await store.add(text)
        assert [e.text for e in store.entries] == ["c", "a", "b"]


class TestRemove:
    async def test_remove_existing(self, store):
        first = await store.add("first")
        second = await store.add("second")

        assert await store.remove(first.id)
        assert store.count() == 1
        assert store.entries == (second,)
        assert store.get(first.id) is None

    async def test_remove_missing_is_noop(self, store):
        await store.add("only")
        assert not await store.remove(424242)
        assert store.count() == 1

    async def test_remove_rewrites_snapshot(self, store, storage):
        entry = await store.add("gone soon")
        await store.remove(entry.id)
        assert json.loads(await storage.load(store.key)) == []


class TestLoad:
    async def test_missing_record_gives_empty(self, store):
        assert await store.load() == []
        assert store.count() == 0

    async def test_roundtrip_through_fresh_store(self, store, storage):
        await store.add("one")
        await store.add("two")

        fresh = EntryStore(storage)
        loaded = await fresh.load()
        assert loaded == list(store.entries)
        assert fresh.entries == store.entries

    async def test_roundtrip_through_local_storage(self, tmp_path):
        storage = LocalStorage(base_path=str(tmp_path))
        writer = EntryStore(storage, clock=lambda: 42, today=lambda: "01/01/2024")
        await writer.add("persisted")

        reader = EntryStore(LocalStorage(base_path=str(tmp_path)))
        await reader.load()
        assert reader.entries == (Entry(id=42, text="persisted", date="01/01/2024"),)

    @pytest.mark.parametrize("raw", ["not json", "{", '{"id": 1}', '"a string"', "42", "null"])
    async def test_malformed_snapshot_is_discarded(self, raw):
        store = EntryStore(MemoryStorage(initial={"devlogEntries": raw}))
        assert await store.load() == []
        assert store.count() == 0

    async def test_non_object_items_kept_and_counted(self):
        items = [{"id": 1, "text": "ok", "date": "d"}, "junk", None, 3]
        storage = MemoryStorage(initial={"devlogEntries": json.dumps(items)})
        store = EntryStore(storage, clock=lambda: 2, today=lambda: "d")
        await store.load()
        assert store.count() == len(items)
        assert store.export_text() == "[d] ok"

        await store.add("new")
        assert json.loads(await storage.load("devlogEntries")) == items + [{"id": 2, "text": "new", "date": "d"}]

    async def test_partial_records_written_back_unchanged(self):
        items = [{"date": "d"}, {"id": 1, "text": 5, "date": "d", "mood": "good"}]
        storage = MemoryStorage(initial={"devlogEntries": json.dumps(items)})
        store = EntryStore(storage, clock=lambda: 2, today=lambda: "d")
        await store.load()
        assert store.entries[1].text == "5"

        await store.remove(2)
        assert json.loads(await storage.load("devlogEntries")) == items

    async def test_textless_records_kept_but_counted(self):
        raw = json.dumps([{"id": 1, "date": "d"}, {"id": 2, "text": "ok", "date": "d"}])
        store = EntryStore(MemoryStorage(initial={"devlogEntries": raw}))
        await store.load()
        assert store.count() == 2

    async def test_load_replaces_collection(self, store, storage):
        await store.add("one")
        await store.load()
        await store.load()
        assert store.count() == 1

    async def test_custom_key(self, storage):
        store = EntryStore(storage, key="otherKey", clock=lambda: 1, today=lambda: "d")
        await store.add("x")
        assert await storage.get("otherKey") is not None
        assert await storage.get("devlogEntries") is None


class TestExport:
    async def test_empty_raises(self, store):
        with pytest.raises(NothingToExportError, match="No entries"):
            store.export_text()

    async def test_single_entry(self):
        raw = json.dumps([{"id": 1, "date": "1/1/2024", "text": "hello"}])
        store = EntryStore(MemoryStorage(initial={"devlogEntries": raw}))
        await store.load()
        assert store.export_text() == "[1/1/2024] hello"

    async def test_lines_joined_without_trailing_newline(self, store):
        await store.add("one")
        await store.add("two")
        assert store.export_text() == "[17/10/2026] one\n[17/10/2026] two"

    async def test_incomplete_entries_skipped(self):
        raw = json.dumps([{"id": 1, "text": "no date"}, {"id": 2, "text": "ok", "date": "d"}])
        store = EntryStore(MemoryStorage(initial={"devlogEntries": raw}))
        await store.load()
        assert store.export_text() == "[d] ok"


class TestEvents:
    async def test_mutations_emit_events(self, storage):
        bus = EventBus()
        seen: list[tuple[str, dict]] = []
        for name in (ENTRIES_LOADED, ENTRY_ADDED, ENTRY_REMOVED):
            bus.on(name, lambda event: seen.append((event.name, event.payload)))

        store = EntryStore(storage, clock=lambda: 7, today=lambda: "d", events=bus)
        await store.load()
        await store.add("x")
        await store.remove(7)
        await store.remove(7)  # no-op, no event

        assert seen == [
            (ENTRIES_LOADED, {"count": 0}),
            (ENTRY_ADDED, {"id": 7, "text": "x", "date": "d"}),
            (ENTRY_REMOVED, {"id": 7}),
        ]
