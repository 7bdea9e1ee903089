"""
Dashboard metric schemas.

The ACWR status labels are *operational categories*:

- ``danger``  — ACWR < 0.70 or ACWR >= 1.50  (displayed as "High Risk")
- ``caution`` — 0.70 <= ACWR < 0.80 or 1.30 < ACWR < 1.50
- ``optimal`` — 0.80 <= ACWR <= 1.30

All values are returned unrounded; rounding is a presentation concern.
"""

import datetime
import enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class RiskStatus(str, enum.Enum):
    OPTIMAL = "optimal"
    CAUTION = "caution"
    DANGER = "danger"

    @property
    def label(self) -> str:
        return _RISK_LABELS[self]


_RISK_LABELS = {
    RiskStatus.OPTIMAL: "Optimal",
    RiskStatus.CAUTION: "Caution",
    RiskStatus.DANGER: "High Risk",
}


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class WeekBucket(_CamelModel):
    """Aggregate over one half-open week window ``[start, end)``.

    Recomputed on every request, never persisted.
    """

    weeks_ago: int = Field(..., ge=0)
    start: datetime.datetime
    end: datetime.datetime
    total_load: float
    session_count: int
    daily_loads: dict[datetime.date, float] = Field(default_factory=dict)
    monotony: float
    strain: float


class DashboardMetrics(_CamelModel):
    """Flat metric structure consumed by the dashboard."""

    current_week_load: float = Field(..., description="Training load over the last 7 days (inclusive)")
    weekly_average: float = Field(..., description="Mean weekly load over the last 4 weeks")
    acwr: float = Field(..., description="Acute:chronic workload ratio (0 when no chronic load)")
    monotony: float = Field(..., description="Mean / stdev of this week's daily loads")
    strain: float = Field(..., description="Current week load x monotony")
    weekly_throws: int = Field(..., description="Throws logged in track sessions this week")


class TrendPoint(_CamelModel):
    """One point of the load trend chart."""

    label: str
    load: float


class WeeklySummaryRow(_CamelModel):
    """One row of the weekly summary table."""

    week_label: str
    total_load: float
    avg_load: float
    sessions: int
    monotony: float
    strain: float


class DashboardResponse(DashboardMetrics):
    """Dashboard metrics plus ACWR status and both time series."""

    as_of: datetime.datetime
    acwr_status: RiskStatus
    acwr_status_label: str
    trend: list[TrendPoint]
    summary: list[WeeklySummaryRow]
