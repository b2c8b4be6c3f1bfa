from __future__ import annotations

from datetime import date, datetime, time


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_clock_time(value: str) -> time:
    """Parse HH:MM or HH:MM:SS string into time."""
    fmt = "%H:%M:%S" if value.count(":") == 2 else "%H:%M"
    return datetime.strptime(value, fmt).time()


def format_clock_time(value: time | None) -> str:
    if value is None:
        return ""
    if value.second:
        return value.strftime("%H:%M:%S")
    return value.strftime("%H:%M")


def today() -> date:
    """Current local date."""
    return date.today()
