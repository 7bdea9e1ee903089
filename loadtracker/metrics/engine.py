"""
Dashboard metrics engine.

Every function here is a pure recomputation over a session snapshot and
an explicit reference instant ``now``; nothing is cached.

Metrics
-------

- **Current week load** — Σ training load over the last 7 days.  This is
  the one window that includes its end instant.
- **Weekly average** — mean of the totals of the 4 most recent week
  buckets (half-open windows).
- **ACWR** — acute (current week load) over chronic (28-day total / 4).
  Returns 0 when there is no chronic load.
- **Monotony** — mean / population stdev of the daily loads.  0 when
  fewer than two distinct days are present or the stdev is 0.
- **Strain** — week load × monotony.

The 8-week trend runs oldest → newest ("Week 1" .. "Week 8"), the weekly
summary newest → oldest ("Current", "1 week ago", ...).
"""

from __future__ import annotations

import datetime
import logging
import statistics
from collections import defaultdict
from typing import Collection, Iterable, Iterator, Optional, Sequence

from pydantic import BaseModel, Field

from loadtracker.core.clock import as_utc
from loadtracker.metrics.risk import classify_acwr
from loadtracker.metrics.windows import (
    DAYS_PER_WEEK,
    Window,
    group_by_week,
    sessions_in,
    trailing_window,
    week_window,
)
from loadtracker.schemas.metrics import (
    DashboardMetrics,
    DashboardResponse,
    TrendPoint,
    WeekBucket,
    WeeklySummaryRow,
)
from loadtracker.schemas.session import AnySession

logger = logging.getLogger(__name__)


# ======================================================================
# Configuration
# ======================================================================


class MetricsConfig(BaseModel):
    """Window lengths used by the metrics engine."""

    acute_days: int = Field(7, ge=1, le=14)
    chronic_days: int = Field(28, ge=7, le=56)
    average_weeks: int = Field(4, ge=1, le=12)
    history_weeks: int = Field(8, ge=1, le=52)

    @property
    def chronic_weeks(self) -> float:
        return self.chronic_days / float(DAYS_PER_WEEK)


DEFAULT_CONFIG = MetricsConfig()


# ======================================================================
# Aggregation helpers
# ======================================================================


def total_load(sessions: Iterable[AnySession]) -> float:
    return sum(s.training_load for s in sessions)


def daily_loads(sessions: Iterable[AnySession]) -> dict[datetime.date, float]:
    """Sum training load per calendar day.  Same-day sessions accumulate."""
    per_day: dict[datetime.date, float] = defaultdict(float)
    for s in sessions:
        per_day[s.date] += s.training_load
    return dict(per_day)


def compute_monotony(loads: Collection[float]) -> float:
    """Mean / population standard deviation of *loads*, or 0 when undefined."""
    if len(loads) < 2:
        return 0.0
    std_dev = statistics.pstdev(loads)
    if std_dev <= 0:
        return 0.0
    return statistics.fmean(loads) / std_dev


def compute_acwr(acute_load: float, chronic_load: float) -> float:
    return acute_load / chronic_load if chronic_load > 0 else 0.0


def weekly_throws(sessions: Iterable[AnySession]) -> int:
    """Total throws across the track sessions in *sessions*."""
    throws = 0
    for s in sessions:
        if s.type == "Track":
            throws += s.total_throws
        elif s.type == "Gym":
            continue
        else:
            raise ValueError(f"Unknown session type: {s.type!r}")
    return throws


def build_week_bucket(weeks_ago: int, window: Window, sessions: Sequence[AnySession]) -> WeekBucket:
    per_day = daily_loads(sessions)
    week_total = total_load(sessions)
    monotony = compute_monotony(list(per_day.values()))
    return WeekBucket(weeks_ago=weeks_ago, start=window.start, end=window.end, total_load=week_total,
                      session_count=len(sessions), daily_loads=per_day, monotony=monotony,
                      strain=week_total * monotony, )


def week_buckets(sessions: Sequence[AnySession], now: datetime.datetime, weeks: int) -> list[WeekBucket]:
    """Buckets for ``weeks_ago = 0 .. weeks-1`` (newest first)."""
    return [build_week_bucket(weeks_ago, window, in_week) for weeks_ago, window, in_week in
            group_by_week(sessions, now, weeks)]


# ======================================================================
# Dashboard metrics
# ======================================================================


def compute_metrics(sessions: Sequence[AnySession], now: datetime.datetime,
                    config: Optional[MetricsConfig] = None, ) -> DashboardMetrics:
    """Compute the flat dashboard metrics for *sessions* as of *now*."""
    cfg = config or DEFAULT_CONFIG
    now = as_utc(now)

    # --- Acute window (inclusive of now) ---
    current_week = sessions_in(sessions, trailing_window(now, cfg.acute_days), inclusive=True)
    current_week_load = total_load(current_week)

    # --- Weekly average over the most recent buckets ---
    buckets = week_buckets(sessions, now, cfg.average_weeks)
    weekly_average = sum(b.total_load for b in buckets) / len(buckets)

    # --- Chronic window ---
    chronic_sessions = sessions_in(sessions, trailing_window(now, cfg.chronic_days))
    chronic_load = total_load(chronic_sessions) / cfg.chronic_weeks
    acwr = compute_acwr(current_week_load, chronic_load)

    # --- Monotony / strain over this week's daily loads ---
    monotony = compute_monotony(list(daily_loads(current_week).values()))

    return DashboardMetrics(current_week_load=current_week_load, weekly_average=weekly_average, acwr=acwr,
                            monotony=monotony, strain=current_week_load * monotony,
                            weekly_throws=weekly_throws(current_week), )


def iter_load_trend(sessions: Sequence[AnySession], now: datetime.datetime,
                    weeks: Optional[int] = None, ) -> Iterator[TrendPoint]:
    """Yield the weekly load trend from oldest (``Week 1``) to current."""
    if weeks is None:
        weeks = DEFAULT_CONFIG.history_weeks
    for weeks_ago in range(weeks - 1, -1, -1):
        window = week_window(now, weeks_ago)
        yield TrendPoint(label=f"Week {weeks - weeks_ago}", load=total_load(sessions_in(sessions, window)))


def weekly_summary(sessions: Sequence[AnySession], now: datetime.datetime,
                   weeks: Optional[int] = None, ) -> list[WeeklySummaryRow]:
    """Summary rows from the current week back to ``weeks - 1`` weeks ago."""
    if weeks is None:
        weeks = DEFAULT_CONFIG.history_weeks
    rows: list[WeeklySummaryRow] = []
    for bucket in week_buckets(sessions, now, weeks):
        avg = bucket.total_load / bucket.session_count if bucket.session_count else 0.0
        rows.append(WeeklySummaryRow(week_label=week_label(bucket.weeks_ago), total_load=bucket.total_load,
                                     avg_load=avg, sessions=bucket.session_count, monotony=bucket.monotony,
                                     strain=bucket.strain, ))
    return rows


def week_label(weeks_ago: int) -> str:
    if weeks_ago == 0:
        return "Current"
    return f"{weeks_ago} week{'s' if weeks_ago > 1 else ''} ago"


def compute_dashboard(sessions: Sequence[AnySession], now: datetime.datetime,
                      config: Optional[MetricsConfig] = None, ) -> DashboardResponse:
    """Metrics, ACWR status and both time series in one response."""
    cfg = config or DEFAULT_CONFIG
    now = as_utc(now)
    metrics = compute_metrics(sessions, now, cfg)
    status = classify_acwr(metrics.acwr)
    logger.debug("Dashboard as of %s: %d sessions, ACWR %.3f (%s)", now.isoformat(), len(sessions), metrics.acwr,
                 status.value)

    return DashboardResponse(**metrics.model_dump(), as_of=now, acwr_status=status, acwr_status_label=status.label,
                             trend=list(iter_load_trend(sessions, now, cfg.history_weeks)),
                             summary=weekly_summary(sessions, now, cfg.history_weeks), )
