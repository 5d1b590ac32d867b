"""
Calendar arithmetic for the trend engine.

Every helper returns a new :class:`datetime.date`; nothing is advanced in place.
Weeks start on Sunday.
"""

from __future__ import annotations

import calendar
import datetime


def add_months(day: datetime.date, months: int) -> datetime.date:
    """Shift *day* by *months* calendar months (negative allowed).

    The day-of-month is clamped to the length of the target month, so
    ``add_months(2024-01-31, 1) == 2024-02-29``.
    """
    index = day.year * 12 + (day.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    last = calendar.monthrange(year, month)[1]
    return datetime.date(year, month, min(day.day, last))


def add_years(day: datetime.date, years: int) -> datetime.date:
    return add_months(day, years * 12)


def week_start(day: datetime.date) -> datetime.date:
    """The Sunday that opens *day*'s week."""
    # isoweekday(): Monday=1 .. Sunday=7
    return day - datetime.timedelta(days=day.isoweekday() % 7)


def month_start(day: datetime.date) -> datetime.date:
    return day.replace(day=1)


def quarter_start(day: datetime.date) -> datetime.date:
    return datetime.date(day.year, ((day.month - 1) // 3) * 3 + 1, 1)


def year_start(day: datetime.date) -> datetime.date:
    return datetime.date(day.year, 1, 1)
