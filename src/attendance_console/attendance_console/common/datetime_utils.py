from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Optional

from ..core.constants import DEFAULT_REPORT_DAYS

# Short month names as rendered by the id-ID locale
_ID_MONTHS = ("Jan", "Feb", "Mar", "Apr", "Mei", "Jun", "Jul", "Agu", "Sep", "Okt", "Nov", "Des")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_clock(value: str) -> time:
    """Parse ``HH:MM`` or ``HH:MM:SS`` into a time of day."""
    parts = value.strip().split(":")
    if len(parts) < 2:
        raise ValueError(f"Invalid time string: {value!r}")
    seconds = int(parts[2]) if len(parts) >= 3 and parts[2] else 0
    return time(hour=int(parts[0]), minute=int(parts[1]), second=seconds)


def format_time(value: Optional[str]) -> str:
    """Truncate a backend time to HH:MM; ``-`` when missing."""
    return value[:5] if value else "-"


def format_date(value: Optional[str]) -> str:
    """Render an ISO date/datetime string as e.g. ``19 Okt 2026``."""
    if not value:
        return "-"
    try:
        d = datetime.fromisoformat(value.replace("Z", "+00:00")).date()
    except ValueError:
        try:
            d = parse_iso_date(value[:10])
        except ValueError:
            return value
    return f"{d.day} {_ID_MONTHS[d.month - 1]} {d.year}"


def default_report_range(today: Optional[date] = None) -> tuple[date, date]:
    """Last week up to today, the history screen's initial filter."""
    today = today or date.today()
    return today - timedelta(days=DEFAULT_REPORT_DAYS), today


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
