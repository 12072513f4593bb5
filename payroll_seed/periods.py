"""Calendar arithmetic for payroll periods."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Iterator

_DAY = timedelta(days=1)


def add_months(day: date, months: int) -> date:
    """Add months, letting an overflowing day roll into the next month."""
    total = day.year * 12 + (day.month - 1) + months
    year, month = divmod(total, 12)
    return date(year, month + 1, 1) + timedelta(days=day.day - 1)


def _stepped(start: date, end: date, days: int) -> Iterator[tuple[date, date]]:
    current = start
    while current < end:
        following = current + timedelta(days=days)
        yield current, following
        current = following


def monthly_periods(start: date, end: date) -> Iterator[tuple[date, date]]:
    """Yield (first, last) day of each month-long period starting before end."""
    current = start
    while current < end:
        following = add_months(current, 1)
        yield current, following - _DAY
        current = following


def biweekly_periods(start: date, end: date) -> Iterator[tuple[date, date]]:
    """Yield two-week periods; each ends on the day the next one starts."""
    return _stepped(start, end, 14)


def weekly_periods(start: date, end: date) -> Iterator[tuple[date, date]]:
    """Yield one-week periods; each ends on the day the next one starts."""
    return _stepped(start, end, 7)


def date_range(start: date, end: date) -> Iterator[date]:
    """Yield each day from start up to but not including end."""
    current = start
    while current < end:
        yield current
        current += _DAY