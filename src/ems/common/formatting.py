from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional

from .datetime_utils import format_clock_time


def money(value: Optional[Decimal]) -> str:
    if value is None:
        return ""
    return f"${value:,.2f}"


def day(value: Optional[date]) -> str:
    return value.isoformat() if value else ""


def clock(value) -> str:
    return format_clock_time(value) or "--:--"


def employee_name(item) -> str:
    return item.employee.full_name if item.employee else "Unknown"
