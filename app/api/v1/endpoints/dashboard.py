"""
Dashboard endpoints: headline statistics and volume trend.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from app.api.dependencies import get_current_user
from app.core.units import WeightUnit
from app.db.session import get_db
from app.models.user import User
from app.schemas.dashboard import DashboardStatsResponse, VolumeTrendResponse
from app.services.dashboard_service import DashboardService

router = APIRouter()


@router.get(
    "/stats",
    summary="Get today's, this week's and recent volume statistics.",
    response_model=DashboardStatsResponse,
)
def get_stats(
    as_of: Optional[datetime.date] = Query(
        None, description="Reference date (defaults to today)"
    ),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    ref_date = as_of or datetime.date.today()
    return DashboardService(db).stats(user.id, ref_date)


@router.get(
    "/volume-trend",
    summary="Get the bucketed volume trend with previous-period comparison.",
    response_model=VolumeTrendResponse,
)
def get_volume_trend(
    period: Optional[str] = Query(
        None, description="1W, 4W, 1Y, MTD, QTD, YTD or ALL (unknown values mean 4W)"
    ),
    as_of: Optional[datetime.date] = Query(
        None, description="Reference date (defaults to today)"
    ),
    unit: Optional[WeightUnit] = Query(
        None, description="Weight unit of the returned volumes (defaults to configuration)"
    ),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    ref_date = as_of or datetime.date.today()
    return DashboardService(db).volume_trend(user.id, period, ref_date, unit)
