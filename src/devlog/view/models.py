"""View state for the journal list.

The view is a plain model that a host draws however it likes (terminal
table, HTML, test assertions). Rows are appended, hidden and removed;
they are never re-sorted or re-rendered.
"""

from __future__ import annotations

from dataclasses import dataclass, field

ENTRY_FIELD = "entry-text"
COUNT_DISPLAY = "entry-count"


@dataclass
class Row:
    """One rendered list row: the ``"[date] text"`` line plus its delete affordance."""

    entry_id: int
    text: str
    visible: bool = True


@dataclass
class ListView:
    """Everything the host needs to draw the journal page.

    Attributes:
        rows: Rendered rows in render order.
        draft: Current value of the text-entry field.
        keyword: Current value of the search field.
        count_label: Live entry-count display.
        no_results_visible: Whether the "no results" indicator is shown.
        focused: Name of the focused control.
    """

    rows: list[Row] = field(default_factory=list)
    draft: str = ""
    keyword: str = ""
    count_label: str = ""
    no_results_visible: bool = False
    focused: str | None = None

    @property
    def visible_rows(self) -> list[Row]:
        return [row for row in self.rows if row.visible]

    def find(self, entry_id: int) -> Row | None:
        for row in self.rows:
            if row.entry_id == entry_id:
                return row
        return None


def count_label(count: int) -> str:
    """``You have N entries logged.`` with the singular for exactly one."""
    return f"You have {count} entr{'y' if count == 1 else 'ies'} logged."
