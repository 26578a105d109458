"""ViewController — routes user interactions to the EntryStore.

Handlers mirror the journal page: submitting the form, the Ctrl/Cmd+Enter
shortcut, a row's delete button, typing in the search field, the download
button and page load. Each handler updates the ``ListView`` and asks the
host to redraw.
"""

from __future__ import annotations

from loguru import logger

from devlog.core.config import EXPORT_FILENAME
from devlog.core.events import EXPORT_CREATED, Event, EventBus
from devlog.core.exceptions import NothingToExportError
from devlog.journal.models import Entry, ExportFile
from devlog.journal.search import matches
from devlog.journal.store import EntryStore

from .host import Host
from .models import COUNT_DISPLAY, ENTRY_FIELD, ListView, Row, count_label

CONFIRM_DELETE = "Are you sure you want to delete this entry?"
SUBMIT_KEY = "Enter"


class ViewController:
    """Keeps a ``ListView`` in step with an ``EntryStore``.

    Usage::

        controller = ViewController(store, host)
        await controller.start()
        controller.set_draft("Fixed the bug")
        await controller.submit()
    """

    def __init__(
        self,
        store: EntryStore,
        host: Host,
        *,
        export_filename: str = EXPORT_FILENAME,
        events: EventBus | None = None,
    ):
        self.store = store
        self.host = host
        self.export_filename = export_filename
        self._events = events
        self.view = ListView(count_label=count_label(0))

    async def start(self) -> None:
        """Load persisted entries and render each one without re-saving.

        There is no clear-before-render step: calling this twice shows every
        row twice while the store still holds each entry once.
        """
        for entry in await self.store.load():
            self.render(entry)
        self._update_count()
        self.host.refresh(self.view)

    def render(self, entry: Entry) -> Row | None:
        """Append a row for *entry*. Entries without text are never shown."""
        if not entry.text:
            return None
        row = Row(entry_id=entry.id, text=entry.formatted)
        self.view.rows.append(row)
        self.view.draft = ""
        self._update_count()
        return row

    def set_draft(self, text: str) -> None:
        self.view.draft = text

    async def submit(self) -> Entry | None:
        """Create an entry from the draft. Blank drafts are ignored silently."""
        entry = await self.store.add(self.view.draft)
        if entry is None:
            return None
        self.render(entry)
        self.view.focused = COUNT_DISPLAY
        self.host.refresh(self.view)
        return entry

    async def key_down(self, key: str, *, ctrl: bool = False, meta: bool = False) -> bool:
        """Ctrl+Enter or Cmd+Enter in the text field submits the form."""
        if (ctrl or meta) and key == SUBMIT_KEY:
            await self.submit()
            return True
        return False

    async def delete(self, entry_id: int) -> bool:
        """Delete a rendered entry after the host confirms.

        Returns True when the row and the entry were removed, False when the
        user declined or no such row is shown.
        """
        row = self.view.find(entry_id)
        if row is None:
            return False
        if not await self.host.confirm(CONFIRM_DELETE):
            logger.debug(f"Deletion of {entry_id} cancelled")
            return False

        self.view.rows.remove(row)
        await self.store.remove(entry_id)
        self._update_count()
        self.host.refresh(self.view)
        return True

    def search(self, keyword: str) -> list[Row]:
        """Hide rows whose text does not contain *keyword* (case-insensitive).

        Rows are hidden, not removed, so an empty keyword restores them all.
        Returns the rows left visible.
        """
        self.view.keyword = keyword
        any_visible = False
        for row in self.view.rows:
            row.visible = matches(row.text, keyword)
            any_visible = any_visible or row.visible
        self.view.no_results_visible = not any_visible
        self.host.refresh(self.view)
        return self.view.visible_rows

    async def download(self) -> ExportFile | None:
        """Hand the export file to the host, or alert when there is nothing to export."""
        try:
            content = self.store.export_text()
        except NothingToExportError as e:
            self.host.alert(str(e))
            return None

        file = ExportFile(filename=self.export_filename, content=content)
        await self.host.download(file)
        if self._events is not None:
            await self._events.emit(
                Event(name=EXPORT_CREATED, payload={"filename": file.filename}, source="view")
            )
        return file

    def page_loaded(self) -> None:
        self.view.focused = ENTRY_FIELD

    def _update_count(self) -> None:
        self.view.count_label = count_label(self.store.count())
