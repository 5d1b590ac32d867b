"""
Series builder: dense, period-over-period aligned chart series.

The output axis holds one point per bucket from the bucket containing
``current_start`` up to (not including) ``current_end``, whether or not the
bucket holds any volume.

Previous-period values are matched by **relative position**, not by date: the
``n``-th point is compared against the bucket ``n`` steps after
``previous_start``.  A step is one bucket long: a day, seven days or a
calendar month.  This lets a 31-day month be compared with a 30-day month
tick by tick; a position past the end of the shorter window finds no bucket
and reports 0.
"""

from __future__ import annotations

import datetime
from typing import Iterator, Optional

from app.schemas.trend import Granularity, ResolvedWindow, SeriesPoint, VolumeTrend
from app.trends.buckets import BucketMap, bucket_key
from app.trends.dates import add_months

_STEP_DAYS: dict[Granularity, int] = {
    Granularity.DAY: 1,
    Granularity.WEEK: 7,
}


# ======================================================================
# Axis enumeration
# ======================================================================


def step(start: datetime.date, index: int, granularity: Granularity) -> datetime.date:
    """The date *index* buckets after *start*."""
    if granularity is Granularity.MONTH:
        return add_months(start, index)
    return start + datetime.timedelta(days=index * _STEP_DAYS[granularity])


def iter_bucket_dates(start: datetime.date, end: datetime.date, granularity: Granularity) -> Iterator[datetime.date]:
    """Yield dates in ``[start, end)`` one bucket apart, beginning at *start*.

    Each date is derived from *start* by its step index, so month steps never
    drift after passing through a short month.
    """
    index = 0
    while True:
        current = step(start, index, granularity)
        if current >= end:
            return
        yield current
        index += 1


def corresponding_date(index: int, window: ResolvedWindow) -> datetime.date:
    """Date in the previous window matching the *index*-th point of the axis."""
    return step(window.previous_start, index, window.granularity)


# ======================================================================
# Totals
# ======================================================================


def percentage_change(current_total: float, previous_total: float) -> float:
    """Relative change in percent.

    With no previous volume the change is 100 if anything was lifted in the
    current period and 0 otherwise.
    """
    if previous_total > 0:
        return (current_total - previous_total) / previous_total * 100
    return 100.0 if current_total > 0 else 0.0


# ======================================================================
# Main entry point
# ======================================================================


def build_series(window: ResolvedWindow, current_buckets: BucketMap,
                 previous_buckets: Optional[BucketMap] = None, ) -> VolumeTrend:
    """Combine both bucket maps into a :class:`VolumeTrend`.

    Args:
        window: Output of :func:`app.trends.periods.resolve_period`.
        current_buckets: Aggregated volumes of the current window.
        previous_buckets: Aggregated volumes of the previous window
            (ignored when the window has no comparison).

    Returns:
        :class:`VolumeTrend` with the dense point list, both totals and the
        percentage change.
    """
    previous_buckets = previous_buckets if window.has_comparison and previous_buckets else { }
    axis_start = bucket_key(window.current_start, window.granularity)

    points: list[SeriesPoint] = []
    for index, key in enumerate(iter_bucket_dates(axis_start, window.current_end, window.granularity)):
        previous_volume: Optional[float] = None
        if window.has_comparison:
            previous_key = bucket_key(corresponding_date(index, window), window.granularity)
            previous_volume = previous_buckets.get(previous_key, 0.0)
        points.append(SeriesPoint(bucket_key=key, current_volume=current_buckets.get(key, 0.0),
                                  previous_volume=previous_volume, ))

    # Totals come from the maps, not the axis: keys off the axis still count.
    current_total = float(sum(current_buckets.values()))
    previous_total = float(sum(previous_buckets.values()))

    return VolumeTrend(points=points, current_total=current_total, previous_total=previous_total,
                       percentage_change=percentage_change(current_total, previous_total), )
