"""CLI gateway — the journal page as a terminal session, rendered with rich."""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Confirm
from rich.table import Table
from rich.text import Text

from devlog.core.config import EXPORT_FILENAME
from devlog.core.events import EventBus
from devlog.core.exceptions import DevlogError
from devlog.core.storage import StorageError
from devlog.journal.export import write_export
from devlog.journal.models import ExportFile
from devlog.journal.store import EntryStore
from devlog.view.controller import ViewController
from devlog.view.models import ListView

from .base import JournalGateway

HELP_TEXT = (
    "Type a line and press Enter to log it.\n\n"
    "Commands:\n"
    "  /search TEXT — Show only entries containing TEXT\n"
    "  /clear       — Clear the search\n"
    "  /delete N    — Delete entry number N\n"
    "  /export      — Save all entries to a text file\n"
    "  /exit        — Quit\n"
    "  /help        — Show this help"
)


class CliGateway(JournalGateway):
    """Terminal journal.

    Each input line is either a command (``/search``, ``/delete`` ...) or the
    text of a new entry. Rows are numbered by their position among the
    visible rows, and ``/delete N`` refers to that number.
    """

    def __init__(
        self,
        store: EntryStore,
        *,
        export_dir: str | Path,
        export_filename: str = EXPORT_FILENAME,
        console: Console | None = None,
        events: EventBus | None = None,
    ):
        self.console = console or Console()
        self.export_dir = Path(export_dir).expanduser()
        self.controller = ViewController(store, self, export_filename=export_filename, events=events)
        self.last_export: Path | None = None
        self._running = False

    async def start(self) -> None:
        """Load the journal and run the input loop until /exit or EOF."""
        self.console.print(Panel("Type to log an entry. Commands: /help, /search, /delete, /export, /exit", title="devlog"))
        await self.controller.start()
        self.controller.page_loaded()
        self._running = True

        while self._running:
            try:
                line = self.console.input("[bold cyan]devlog>[/] ")
            except (EOFError, KeyboardInterrupt):
                self.console.print()
                break
            try:
                await self.handle_input(line)
            except (DevlogError, StorageError) as e:
                self.alert(str(e))

    async def handle_input(self, line: str) -> None:
        stripped = line.strip()
        command, _, arg = stripped.partition(" ")
        command = command.lower()

        if command == "/exit":
            await self.stop()
        elif command == "/help":
            self.console.print(Panel(HELP_TEXT, title="Help"))
        elif command == "/search":
            self.controller.search(arg.strip())
        elif command == "/clear":
            self.controller.search("")
        elif command == "/delete":
            await self._delete(arg.strip())
        elif command == "/export":
            await self.controller.download()
        else:
            self.controller.set_draft(line)
            await self.controller.submit()

    async def stop(self) -> None:
        self._running = False

    async def _delete(self, arg: str) -> None:
        visible = self.controller.view.visible_rows
        if not arg.isdigit() or not 1 <= int(arg) <= len(visible):
            self.console.print(f"[yellow]No entry numbered '{escape(arg)}'.[/yellow]")
            return
        await self.controller.delete(visible[int(arg) - 1].entry_id)

    # -- Host -----------------------------------------------------------

    async def confirm(self, message: str) -> bool:
        return Confirm.ask(message, console=self.console, default=False)

    def alert(self, message: str) -> None:
        self.console.print(Panel(Text(message), title="Notice", border_style="yellow"))

    async def download(self, file: ExportFile) -> None:
        self.last_export = await write_export(file, self.export_dir)
        self.console.print(f"[green]Saved {escape(file.filename)} to {escape(str(self.last_export))}[/green]")

    def refresh(self, view: ListView) -> None:
        table = Table(show_header=False, box=None, pad_edge=False)
        table.add_column("#", style="dim", justify="right")
        table.add_column("Entry")
        for number, row in enumerate(view.visible_rows, start=1):
            table.add_row(str(number), Text(row.text))

        self.console.print(table)
        if view.no_results_visible:
            self.console.print("[dim]No results found.[/dim]")
        self.console.print(f"[bold]{view.count_label}[/bold]")
