"""Base gateway — abstract interface for journal front ends.

A gateway owns the interaction loop of one front end (terminal, web page,
etc.), delivers user input to a ``ViewController`` and implements the
``Host`` hooks the controller calls back into.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from devlog.journal.models import ExportFile
from devlog.view.models import ListView


class JournalGateway(ABC):
    """Abstract base for journal front ends.

    Subclasses implement the ``Host`` protocol (confirm, alert, download,
    refresh) plus the input loop.

    Usage::

        gateway = CliGateway(store, export_dir="~/.devlog/exports")
        await gateway.start()
    """

    @abstractmethod
    async def start(self) -> None:
        """Load the journal and begin listening for input."""

    @abstractmethod
    async def handle_input(self, line: str) -> None:
        """Handle one unit of user input (a line, a click, a key press)."""

    async def stop(self) -> None:  # noqa: B027
        """Stop the gateway. Optional override."""

    @abstractmethod
    async def confirm(self, message: str) -> bool:
        """Blocking yes/no prompt."""

    @abstractmethod
    def alert(self, message: str) -> None:
        """Blocking notice."""

    @abstractmethod
    async def download(self, file: ExportFile) -> None:
        """Deliver an export file to the user."""

    def refresh(self, view: ListView) -> None:  # noqa: B027
        """Redraw after a view change. Optional override."""
