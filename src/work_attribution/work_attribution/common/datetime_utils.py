from __future__ import annotations

import math
from datetime import date, datetime, timedelta


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def _as_date(value: date | datetime) -> date:
    # A datetime is truncated to its calendar day (UTC midnight of that day).
    if isinstance(value, datetime):
        return value.date()
    return value


def _week_thursday(value: date | datetime) -> date:
    d = _as_date(value)
    return d + timedelta(days=4 - d.isoweekday())


def week_number(value: date | datetime) -> int:
    """Week number of ``value``: Thursday of its week, counted from Jan 1."""
    shifted = _week_thursday(value)
    year_start = date(shifted.year, 1, 1)
    return math.ceil(((shifted - year_start).days + 1) / 7)


def week_year(value: date | datetime) -> int:
    """Year that owns the week of ``value`` (the year of its Thursday)."""
    return _week_thursday(value).year


def week_dates(year: int, week: int) -> list[date]:
    """The 7 calendar days of ``week`` in ``year``, Monday first."""
    jan4 = date(year, 1, 4)
    first_monday = jan4 - timedelta(days=jan4.weekday())
    week_start = first_monday + timedelta(days=(week - 1) * 7)
    return [week_start + timedelta(days=i) for i in range(7)]


def month_range(year: int, month: int) -> tuple[date, date]:
    """First and last calendar day of a month."""
    if not 1 <= int(month) <= 12:
        raise ValueError(f"Invalid month: {month!r}")
    start = date(year, month, 1)
    if month == 12:
        end = date(year, 12, 31)
    else:
        end = date(year, month + 1, 1) - timedelta(days=1)
    return start, end
