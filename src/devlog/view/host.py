"""Host protocol — what the surrounding environment must provide.

The controller never talks to a terminal or a file system directly. It
asks its host to confirm, to show a notice, to accept a download and to
redraw.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from devlog.journal.models import ExportFile

from .models import ListView


@runtime_checkable
class Host(Protocol):
    """Environment hooks used by ``ViewController``."""

    async def confirm(self, message: str) -> bool:
        """Ask a yes/no question and wait for the answer.

        This is the only point where an interaction is suspended on the user.
        """
        ...

    def alert(self, message: str) -> None:
        """Show a blocking notice."""
        ...

    async def download(self, file: ExportFile) -> None:
        """Offer *file* to the user (save it, stream it, etc.)."""
        ...

    def refresh(self, view: ListView) -> None:
        """Redraw after the view changed."""
        ...
