"""Calendar helpers for recurrence scheduling and reporting windows."""

from datetime import date, datetime
from typing import Optional, Tuple
from zoneinfo import ZoneInfo


def local_today(tz_name: str) -> date:
    """Current calendar date in the given timezone."""
    return datetime.now(ZoneInfo(tz_name)).date()


def days_in_month(year: int, month: int) -> int:
    if month == 12:
        next_month = date(year + 1, 1, 1)
    else:
        next_month = date(year, month + 1, 1)
    return (next_month - date(year, month, 1)).days


def add_months(base: date, months: int, desired_day: int) -> date:
    """
    Shift ``base`` by ``months`` calendar months.

    The day of month is ``desired_day`` clamped to the length of the target
    month, so Jan 31 + 1 month is Feb 29 in a leap year and Feb 28 otherwise.
    """
    total_months = base.month - 1 + months
    year = base.year + total_months // 12
    month = total_months % 12 + 1
    return date(year, month, min(desired_day, days_in_month(year, month)))


def add_one_month(base: date, anchor_day: Optional[int] = None) -> date:
    """Next monthly firing after ``base``, anchored on the configured day of month."""
    return add_months(base, 1, anchor_day or base.day)


def next_registration_date(day: int, today: date) -> date:
    """First date strictly after ``today`` that falls on ``day`` of its month."""
    candidate = add_months(today, 0, day)
    if candidate > today:
        return candidate
    return add_months(today, 1, day)


def month_window(value: date) -> Tuple[date, date]:
    """Half-open [start, end) window of the month containing ``value``."""
    start = value.replace(day=1)
    return start, add_months(start, 1, 1)


def year_window(value: date) -> Tuple[date, date]:
    """Half-open [start, end) window of the year containing ``value``."""
    return date(value.year, 1, 1), date(value.year + 1, 1, 1)
