"""
Dashboard service.

Feeds stored sets through the volume-trend engine (:mod:`app.trends`):

1. resolve the period selector into current / previous windows,
2. load each window's set records (the window is applied in SQL),
3. aggregate both into bucket maps,
4. build the dense, aligned series and convert it to the caller's unit.

The headline statistics reuse the same bucketing aggregator.
"""

import datetime
import logging
from typing import Optional

from sqlmodel import Session

from app.core.config import settings
from app.core.units import WeightUnit, convert_weight
from app.db.repositories.exercise import ExerciseRepository
from app.db.repositories.workout_set import WorkoutSetRepository
from app.schemas.dashboard import DailyVolume, DashboardStatsResponse, VolumeTrendPoint, VolumeTrendResponse
from app.schemas.trend import Granularity, PeriodSelector
from app.trends import aggregate, build_series, resolve_period
from app.trends.dates import week_start

logger = logging.getLogger(__name__)

_ONE_DAY = datetime.timedelta(days=1)

# Look-back windows of the headline statistics (days)
_TREND_DAYS = 30
_AVERAGE_DAYS = 28


class DashboardService:
    """Service computing dashboard statistics and volume trends."""

    def __init__(self, session: Session):
        self.set_repository = WorkoutSetRepository(session)
        self.exercise_repository = ExerciseRepository(session)

    def volume_trend(self, user_id: int, period: Optional[str], today: datetime.date,
                     unit: Optional[WeightUnit] = None, ) -> VolumeTrendResponse:
        """Volume-trend chart for *period* anchored at *today*.

        Args:
            user_id: User ID.
            period: Selector token; unknown or missing tokens fall back to ``4W``.
            today: Reporting date.
            unit: Output weight unit (defaults to ``WEIGHT_UNIT``).

        Returns:
            :class:`VolumeTrendResponse` with volumes in *unit*.
        """
        unit = unit or settings.WEIGHT_UNIT
        selector = PeriodSelector.parse(period or settings.DEFAULT_PERIOD)

        earliest = None
        if selector is PeriodSelector.ALL:
            earliest = self.set_repository.get_earliest_date(user_id)
        window = resolve_period(selector, today, earliest)
        logger.debug("Volume trend user=%s period=%s current=[%s, %s) previous=[%s, %s) granularity=%s", user_id,
                     window.selector.value, window.current_start, window.current_end, window.previous_start,
                     window.previous_end, window.granularity.value)

        current_records = self.set_repository.get_records(user_id, window.current_start, window.current_end)
        current_buckets = aggregate(current_records, window.current_start, window.current_end, window.granularity)

        previous_buckets = { }
        if window.has_comparison:
            previous_records = self.set_repository.get_records(user_id, window.previous_start, window.previous_end)
            previous_buckets = aggregate(previous_records, window.previous_start, window.previous_end,
                                         window.granularity)

        trend = build_series(window, current_buckets, previous_buckets)

        points = [VolumeTrendPoint(date=p.bucket_key, volume=convert_weight(p.current_volume, unit),
                                   previous_volume=(convert_weight(p.previous_volume, unit)
                                                    if p.previous_volume is not None else None), ) for p in
                  trend.points]
        return VolumeTrendResponse(period=window.selector, granularity=window.granularity,
                                   has_comparison=window.has_comparison, current_start=window.current_start,
                                   current_end=window.current_end, unit=unit,
                                   current_total=convert_weight(trend.current_total, unit),
                                   previous_total=convert_weight(trend.previous_total, unit),
                                   percentage_change=trend.percentage_change, points=points, )

    def stats(self, user_id: int, today: datetime.date) -> DashboardStatsResponse:
        """Headline numbers for *today*.  Volumes are in the stored unit."""
        tomorrow = today + _ONE_DAY
        trend_start = today - datetime.timedelta(days=_TREND_DAYS)
        average_start = today - datetime.timedelta(days=_AVERAGE_DAYS)
        this_week = week_start(today)

        # One read covers every window below: the week start is at most 6 days back.
        records = self.set_repository.get_records(user_id, trend_start, tomorrow)

        todays_sets = self.set_repository.get_with_exercise_between(
            user_id, datetime.datetime.combine(today, datetime.time.min),
            datetime.datetime.combine(tomorrow, datetime.time.min))
        todays_volume = sum(aggregate(records, today, tomorrow, Granularity.DAY).values())

        # A training day is any day holding at least one set
        training_days = aggregate(records, this_week, tomorrow, Granularity.DAY)
        last_four_weeks = aggregate(records, average_start, today, Granularity.DAY)
        daily = aggregate(records, trend_start, tomorrow, Granularity.DAY)

        return DashboardStatsResponse(todays_volume=todays_volume, todays_sets=len(todays_sets),
                                      todays_exercises=len({s.exercise_id for s, _ in todays_sets}),
                                      this_week_workouts=len(training_days),
                                      weekly_average=sum(last_four_weeks.values()) / 4,
                                      total_exercises=self.exercise_repository.count_by_user(user_id),
                                      volume_trend=[DailyVolume(date=day, volume=volume) for day, volume in
                                                    sorted(daily.items())], )
