"""
Dashboard API schemas.

``VolumeTrendResponse`` is the chart payload built from the trend engine's
:class:`~app.schemas.trend.VolumeTrend`, expressed in the requested weight unit.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field

from app.core.units import WeightUnit
from app.schemas.trend import Granularity, PeriodSelector


class DailyVolume(BaseModel):
    date: datetime.date
    volume: float


class DashboardStatsResponse(BaseModel):
    """Headline numbers shown above the dashboard chart."""

    todays_volume: float
    todays_sets: int
    todays_exercises: int = Field(..., description="Distinct exercises logged today")
    this_week_workouts: int = Field(..., description="Distinct training days since Sunday")
    weekly_average: float = Field(..., description="Volume of the 28 days before today divided by 4")
    total_exercises: int = Field(..., description="Exercises created by the user")
    volume_trend: list[DailyVolume] = Field(..., description="Daily volume over the last 30 days (sparse)")


class VolumeTrendPoint(BaseModel):
    date: datetime.date = Field(..., description="Bucket key (day, Sunday of week, or first of month)")
    volume: float
    previous_volume: Optional[float] = None


class VolumeTrendResponse(BaseModel):
    """Volume-trend chart payload."""

    period: PeriodSelector
    granularity: Granularity
    has_comparison: bool
    current_start: datetime.date
    current_end: datetime.date = Field(..., description="Exclusive upper bound (tomorrow)")
    unit: WeightUnit
    current_total: float
    previous_total: float
    percentage_change: float
    points: list[VolumeTrendPoint]
