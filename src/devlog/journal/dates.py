"""Clock and date formatting used when entries are created."""

from __future__ import annotations

import time
from datetime import date, datetime

# en-AU short date: day/month/year, zero padded.
EN_AU_DATE_FORMAT = "%d/%m/%Y"


def now_ms() -> int:
    """Current time in milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


def format_en_au(day: date | datetime | None = None) -> str:
    """Format *day* (default: today, local time) as an en-AU short date."""
    if day is None:
        day = datetime.now()
    return day.strftime(EN_AU_DATE_FORMAT)
