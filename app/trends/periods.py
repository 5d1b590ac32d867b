"""
Period resolution: selector token to concrete date windows.

Rules (``today`` is a calendar date, ``current_end = today + 1 day``):

=========  ============================  ===========  ==================================
selector   current_start                 granularity  previous window
=========  ============================  ===========  ==================================
1W         today - 7 days                day          7 days before current_start
4W         today - 28 days               day          28 days before current_start
1Y         today - 1 year                month        1 year before current_start
MTD        first day of this month       day          whole previous calendar month
QTD        first day of this quarter     week         whole previous calendar quarter
YTD        January 1 of this year        month        whole previous calendar year
ALL        earliest record (or today)    month        none (degenerate, unused)
=========  ============================  ===========  ==================================

Unknown selectors resolve as ``4W``; the resolver never fails.
"""

from __future__ import annotations

import datetime
from typing import Optional, Union

from app.schemas.trend import Granularity, PeriodSelector, ResolvedWindow
from app.trends.dates import add_months, add_years, month_start, quarter_start, year_start

_ONE_DAY = datetime.timedelta(days=1)

# Rolling selectors, length in days (day granularity)
_ROLLING_DAYS: dict[PeriodSelector, int] = {
    PeriodSelector.ONE_WEEK: 7,
    PeriodSelector.FOUR_WEEKS: 28,
}


def _as_date(value: Union[datetime.date, datetime.datetime]) -> datetime.date:
    if isinstance(value, datetime.datetime):
        return value.date()
    return value


def resolve_period(selector: Union[PeriodSelector, str, None], today: datetime.date,
                   earliest_record_date: Optional[datetime.date] = None, ) -> ResolvedWindow:
    """Resolve *selector* into a :class:`ResolvedWindow` anchored at *today*.

    Args:
        selector: A :class:`PeriodSelector` or a raw token (``"1W"``, ...).
        today: Reporting date.  A ``datetime`` is truncated to its date.
        earliest_record_date: Date of the user's first logged set.  Only
            consulted for ``ALL``.

    Returns:
        :class:`ResolvedWindow` with half-open current and previous windows.
    """
    if not isinstance(selector, PeriodSelector):
        selector = PeriodSelector.parse(selector)
    today = _as_date(today)
    current_end = today + _ONE_DAY

    if selector in _ROLLING_DAYS:
        span = datetime.timedelta(days=_ROLLING_DAYS[selector])
        start = today - span
        return ResolvedWindow(selector=selector, current_start=start, current_end=current_end,
                              previous_start=start - span, previous_end=start, granularity=Granularity.DAY, )

    if selector is PeriodSelector.ONE_YEAR:
        start = add_years(today, -1)
        return ResolvedWindow(selector=selector, current_start=start, current_end=current_end,
                              previous_start=add_years(start, -1), previous_end=start,
                              granularity=Granularity.MONTH, )

    if selector is PeriodSelector.MONTH_TO_DATE:
        start = month_start(today)
        return ResolvedWindow(selector=selector, current_start=start, current_end=current_end,
                              previous_start=add_months(start, -1), previous_end=start,
                              granularity=Granularity.DAY, )

    if selector is PeriodSelector.QUARTER_TO_DATE:
        start = quarter_start(today)
        return ResolvedWindow(selector=selector, current_start=start, current_end=current_end,
                              previous_start=add_months(start, -3), previous_end=start,
                              granularity=Granularity.WEEK, )

    if selector is PeriodSelector.YEAR_TO_DATE:
        start = year_start(today)
        return ResolvedWindow(selector=selector, current_start=start, current_end=current_end,
                              previous_start=add_years(start, -1), previous_end=start,
                              granularity=Granularity.MONTH, )

    # ALL: no comparison period.  Without records the window is just today.
    start = _as_date(earliest_record_date) if earliest_record_date is not None else today
    start = min(start, today)
    return ResolvedWindow(selector=selector, current_start=start, current_end=current_end, previous_start=start,
                          previous_end=start, granularity=Granularity.MONTH, has_comparison=False, )
