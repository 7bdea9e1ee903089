"""
Time windows over the session history.

All windows are anchored on an explicit reference instant ``now``:

    trailing_window(now, d)  = [now - d days, now)
    week_window(now, k)      = [now - (k+1)·7 days, now - k·7 days)

``k = 0`` is the current (most recent, partial) week.  Consecutive week
windows never overlap and together cover the trailing ``7·N`` days.

A session's instant is its calendar date at midnight UTC.  Membership is
half-open (``start <= instant < end``) everywhere except the current-week
load on the dashboard, which also accepts ``instant == end``.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence, TypeVar

from loadtracker.core.clock import as_utc
from loadtracker.schemas.session import AnySession

DAYS_PER_WEEK = 7

S = TypeVar("S", bound=AnySession)


@dataclass(frozen=True)
class Window:
    """A time interval ``[start, end)`` (or ``[start, end]`` when inclusive)."""

    start: datetime.datetime
    end: datetime.datetime

    def contains(self, instant: datetime.datetime, inclusive: bool = False) -> bool:
        if inclusive:
            return self.start <= instant <= self.end
        return self.start <= instant < self.end


def session_instant(session: AnySession) -> datetime.datetime:
    """Day-granularity instant of a session (midnight UTC of its date)."""
    return datetime.datetime.combine(session.date, datetime.time.min, tzinfo=datetime.timezone.utc)


def trailing_window(now: datetime.datetime, days_back: int) -> Window:
    now = as_utc(now)
    return Window(start=now - datetime.timedelta(days=days_back), end=now)


def week_window(now: datetime.datetime, weeks_ago: int) -> Window:
    now = as_utc(now)
    return Window(start=now - datetime.timedelta(days=(weeks_ago + 1) * DAYS_PER_WEEK),
                  end=now - datetime.timedelta(days=weeks_ago * DAYS_PER_WEEK), )


def sessions_in(sessions: Iterable[S], window: Window, inclusive: bool = False) -> list[S]:
    """Return the sessions whose date falls inside *window*, in input order."""
    return [s for s in sessions if window.contains(session_instant(s), inclusive=inclusive)]


def group_by_week(sessions: Sequence[S], now: datetime.datetime, weeks: int,
                  ) -> Iterator[tuple[int, Window, list[S]]]:
    """Yield ``(weeks_ago, window, sessions)`` for ``weeks_ago = 0 .. weeks-1``."""
    for weeks_ago in range(weeks):
        window = week_window(now, weeks_ago)
        yield weeks_ago, window, sessions_in(sessions, window)
