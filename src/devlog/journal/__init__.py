"""Journal entries, their persistence, search and export.

Provides the Entry model, the EntryStore that keeps the ordered collection
in sync with a storage backend, and substring search helpers.
"""

from .models import Entry, ExportFile
from .search import filter_entries, matches
from .store import EntryStore

__all__ = [
    "Entry",
    "EntryStore",
    "ExportFile",
    "filter_entries",
    "matches",
]
