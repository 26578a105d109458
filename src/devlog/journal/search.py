"""Case-insensitive substring search over formatted entries.

Search never changes the collection. The view uses ``matches`` to decide
row visibility; the CLI uses ``filter_entries`` for ``devlog list --search``.
"""

from __future__ import annotations

from collections.abc import Iterable

from .models import Entry


def matches(text: str, keyword: str) -> bool:
    """Whether *keyword* occurs in *text*, ignoring case. Empty keywords match everything."""
    return keyword.lower() in text.lower()


def filter_entries(entries: Iterable[Entry], keyword: str) -> list[Entry]:
    """Entries whose ``"[date] text"`` line contains *keyword*, in original order."""
    return [entry for entry in entries if entry.text and matches(entry.formatted, keyword)]
