"""
Volume-trend schemas.

Value types flowing through the trend engine (:mod:`app.trends`):

- ``SetRecord``      : one logged set as read from the store (input)
- ``ResolvedWindow`` : current / previous windows for a period selector
- ``SeriesPoint``    : one dense chart tick (output)
- ``VolumeTrend``    : the chart series plus totals (output)

Volumes are expressed in the canonical stored weight unit.  Unit conversion
happens at the API boundary (see :mod:`app.core.units`).
"""

from __future__ import annotations

import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PeriodSelector(str, Enum):
    """Reporting period selected on the dashboard chart."""

    ONE_WEEK = "1W"
    FOUR_WEEKS = "4W"
    ONE_YEAR = "1Y"
    MONTH_TO_DATE = "MTD"
    QUARTER_TO_DATE = "QTD"
    YEAR_TO_DATE = "YTD"
    ALL = "ALL"

    @classmethod
    def parse(cls, token: Optional[str]) -> PeriodSelector:
        """Map a raw token to a selector.  Unknown or empty tokens give ``4W``."""
        try:
            return cls((token or "").strip().upper())
        except ValueError:
            return cls.FOUR_WEEKS


class Granularity(str, Enum):
    """Bucket size of a trend series."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"


class SetRecord(BaseModel):
    """A single logged set, validated once at the store boundary."""

    model_config = ConfigDict(frozen=True)

    occurred_at: datetime.datetime
    weight: float = Field(..., ge=0.0)
    reps: int = Field(..., ge=0)

    @property
    def volume(self) -> float:
        return self.weight * self.reps


class ResolvedWindow(BaseModel):
    """Concrete date windows for a period selector.

    Both windows are half-open: ``start`` inclusive, ``end`` exclusive.
    ``current_end`` is always the day after *today*.
    """

    model_config = ConfigDict(frozen=True)

    selector: PeriodSelector
    current_start: datetime.date
    current_end: datetime.date
    previous_start: datetime.date
    previous_end: datetime.date
    granularity: Granularity
    has_comparison: bool = True


class SeriesPoint(BaseModel):
    """One bucket of the dense output series."""

    bucket_key: datetime.date
    current_volume: float = Field(0.0, ge=0.0)
    previous_volume: Optional[float] = Field(None, ge=0.0, description="None when the period has no comparison", )


class VolumeTrend(BaseModel):
    """Chart-ready series with totals and period-over-period change."""

    points: list[SeriesPoint]
    current_total: float
    previous_total: float
    percentage_change: float
