"""
Dashboard endpoints: load metrics, ACWR status, trend and weekly summary.
"""

import datetime

from fastapi import APIRouter, Depends

from loadtracker.api.dependencies import get_reference_time, get_session_store
from loadtracker.metrics.engine import compute_dashboard, iter_load_trend, weekly_summary
from loadtracker.schemas.metrics import DashboardResponse, TrendPoint, WeeklySummaryRow
from loadtracker.services.session_store import SessionStore

router = APIRouter()


@router.get(
    "",
    summary="Get dashboard metrics (load, ACWR, monotony, strain) with both time series.",
    response_model=DashboardResponse,
)
def get_dashboard(
    now: datetime.datetime = Depends(get_reference_time),
    store: SessionStore = Depends(get_session_store),
):
    return compute_dashboard(store.snapshot(), now)


@router.get(
    "/trend",
    summary="Get the 8-week training load trend (oldest first).",
    response_model=list[TrendPoint],
)
def get_load_trend(
    now: datetime.datetime = Depends(get_reference_time),
    store: SessionStore = Depends(get_session_store),
):
    return list(iter_load_trend(store.snapshot(), now))


@router.get(
    "/summary",
    summary="Get the 8-week summary table (current week first).",
    response_model=list[WeeklySummaryRow],
)
def get_weekly_summary(
    now: datetime.datetime = Depends(get_reference_time),
    store: SessionStore = Depends(get_session_store),
):
    return weekly_summary(store.snapshot(), now)
