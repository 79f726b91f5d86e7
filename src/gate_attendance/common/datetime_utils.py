from __future__ import annotations

from datetime import date, datetime, time


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_clock(value: str) -> time:
    """Parse HH:MM or HH:MM:SS into time."""
    value = value.strip()
    fmt = "%H:%M:%S" if value.count(":") == 2 else "%H:%M"
    return datetime.strptime(value, fmt).time()


def format_clock(value: time | None) -> str:
    return value.strftime("%H:%M:%S") if value else "-"


def minutes_between(start: time, end: time) -> int:
    """Whole minutes from start to end on the same day, never negative."""
    day = date(2000, 1, 1)
    delta = datetime.combine(day, end) - datetime.combine(day, start)
    return max(int(delta.total_seconds() // 60), 0)


def now_local() -> datetime:
    """Current local time.

    Wrapped so callers can pass a fixed time in tests instead.
    """
    return datetime.now().replace(microsecond=0)
