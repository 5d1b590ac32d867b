"""
Bucketing aggregator: folds set records into per-bucket volume sums.
"""

from __future__ import annotations

import datetime
from collections import defaultdict
from typing import Iterable, Union

from app.schemas.trend import Granularity, SetRecord
from app.trends.dates import month_start, week_start

BucketMap = dict[datetime.date, float]


def bucket_key(day: Union[datetime.date, datetime.datetime], granularity: Granularity) -> datetime.date:
    """Canonical key of the bucket containing *day*.

    - ``day``   → the date itself
    - ``week``  → the Sunday opening that week
    - ``month`` → the first day of that month
    """
    if isinstance(day, datetime.datetime):
        day = day.date()
    if granularity is Granularity.WEEK:
        return week_start(day)
    if granularity is Granularity.MONTH:
        return month_start(day)
    return day


def aggregate(records: Iterable[SetRecord], window_start: datetime.date, window_end: datetime.date,
              granularity: Granularity, ) -> BucketMap:
    """Sum ``weight * reps`` per bucket for records inside ``[window_start, window_end)``.

    The store query already applies the same window; filtering again keeps the
    function correct for any caller-supplied collection.  Only buckets holding
    at least one record appear in the result.
    """
    grouped: defaultdict[datetime.date, float] = defaultdict(float)
    for record in records:
        day = record.occurred_at.date()
        if not window_start <= day < window_end:
            continue
        grouped[bucket_key(day, granularity)] += record.volume
    return dict(grouped)
