"""Core data models for the journal.

An Entry is the only persisted entity. Its persisted form is a plain
mapping so the snapshot stays readable and free of schema metadata.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

# Marks entries created in this session rather than loaded from a snapshot.
_CREATED = object()


@dataclass(frozen=True)
class Entry:
    """One journal record.

    Attributes:
        id: Creation time in milliseconds since the epoch. Doubles as the identity.
        text: The trimmed journal content.
        date: Localised creation date, captured once and never re-derived.
        record: The persisted item this entry was loaded from, if any.
    """

    id: int
    text: str
    date: str
    record: Any = field(default=_CREATED, compare=False, repr=False)

    @property
    def formatted(self) -> str:
        """The ``"[date] text"`` line shown in the list and written on export."""
        return f"[{self.date}] {self.text}"

    @property
    def exportable(self) -> bool:
        return bool(self.text) and bool(self.date)

    def to_record(self) -> Any:
        """The persisted form. Loaded records are written back exactly as they were read."""
        if self.record is not _CREATED:
            return self.record
        return {"id": self.id, "text": self.text, "date": self.date}

    @classmethod
    def from_record(cls, record: Any) -> Entry:
        """Wrap one item of a persisted snapshot.

        Items that are not mappings, or lack text, still count as entries but
        are never rendered or exported. Non-string text and dates are shown
        via ``str()``.
        """
        if not isinstance(record, dict):
            return cls(id=None, text="", date="", record=record)
        text = record.get("text")
        day = record.get("date")
        return cls(
            id=record.get("id"),
            text=str(text) if text else "",
            date=str(day) if day else "",
            record=record,
        )

    def __repr__(self) -> str:
        text = str(self.text)
        preview = text[:40] + "..." if len(text) > 40 else text
        return f"Entry(id={self.id}, date='{self.date}', text='{preview}')"


@dataclass(frozen=True)
class ExportFile:
    """A file offered to the host for download.

    Attributes:
        filename: Suggested file name.
        content: Full text body.
        mime_type: Content type handed to the host.
    """

    filename: str
    content: str
    mime_type: str = "text/plain"
