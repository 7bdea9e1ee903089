"""Print the dashboard for the sample sessions, as of now or a given date.

Usage:
    python scripts/simulate_dashboard.py [YYYY-MM-DD]
"""

import datetime
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from loadtracker.core.clock import FixedClock, SystemClock
from loadtracker.db.kv_store import InMemoryKeyValueStore
from loadtracker.metrics.engine import compute_dashboard
from loadtracker.services.sample_data import seed_sample_sessions
from loadtracker.services.session_service import SessionService
from loadtracker.services.session_store import SessionStore


def main() -> None:
    if len(sys.argv) > 1:
        day = datetime.date.fromisoformat(sys.argv[1])
        clock = FixedClock(datetime.datetime.combine(day, datetime.time(12, 0)))
    else:
        clock = SystemClock()

    store = SessionStore(InMemoryKeyValueStore(), clock=clock)
    seed_sample_sessions(SessionService(store))
    dash = compute_dashboard(store.snapshot(), clock.now())

    print("=" * 60)
    print(f"Dashboard as of {dash.as_of:%Y-%m-%d %H:%M} UTC")
    print("=" * 60)
    print(f"Current week load : {round(dash.current_week_load)}")
    print(f"4-week average    : {round(dash.weekly_average)}")
    print(f"ACWR              : {dash.acwr:.2f}  ({dash.acwr_status_label})")
    print(f"Monotony          : {dash.monotony:.2f}")
    print(f"Strain            : {round(dash.strain)}")
    print(f"Weekly throws     : {dash.weekly_throws}")
    print()
    print("Trend:")
    for point in dash.trend:
        print(f"  {point.label:<8} {round(point.load):>6}")
    print()
    print(f"{'Week':<12} {'Total':>7} {'Avg':>6} {'Sess':>5} {'Mono':>6} {'Strain':>7}")
    for row in dash.summary:
        print(f"{row.week_label:<12} {round(row.total_load):>7} {round(row.avg_load):>6} {row.sessions:>5} "
              f"{row.monotony:>6.2f} {round(row.strain):>7}")


if __name__ == "__main__":
    main()
