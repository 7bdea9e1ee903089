"""Pydantic schemas for sessions and dashboard metrics."""

from loadtracker.schemas.metrics import (
    DashboardMetrics,
    DashboardResponse,
    RiskStatus,
    TrendPoint,
    WeekBucket,
    WeeklySummaryRow,
)
from loadtracker.schemas.session import (
    GymSession,
    GymSessionCreate,
    RecentSessionRow,
    SessionRecord,
    TrackSession,
    TrackSessionCreate,
)

__all__ = [
    "DashboardMetrics",
    "DashboardResponse",
    "RiskStatus",
    "TrendPoint",
    "WeekBucket",
    "WeeklySummaryRow",
    "GymSession",
    "GymSessionCreate",
    "RecentSessionRow",
    "SessionRecord",
    "TrackSession",
    "TrackSessionCreate",
]
