"""Load-management core: session loads, time windows, dashboard metrics, ACWR risk."""

from loadtracker.metrics.engine import MetricsConfig, compute_dashboard, compute_metrics
from loadtracker.metrics.load import compute_training_load, compute_volume_load
from loadtracker.metrics.risk import classify_acwr

__all__ = [
    "MetricsConfig",
    "classify_acwr",
    "compute_dashboard",
    "compute_metrics",
    "compute_training_load",
    "compute_volume_load",
]
