"""
Injectable "current instant" source.

Every windowing and metrics computation receives ``now`` explicitly; the
clock is only consulted at the edges (API dependencies, id generation,
sample data).
"""

import datetime
from typing import Protocol


class Clock(Protocol):
    def now(self) -> datetime.datetime:
        ...


class SystemClock:
    """Wall-clock time, always timezone-aware UTC."""

    def now(self) -> datetime.datetime:
        return datetime.datetime.now(datetime.timezone.utc)


class FixedClock:
    """Clock frozen at a given instant.  Used by tests and ``as_of`` queries."""

    def __init__(self, instant: datetime.datetime):
        self.instant = as_utc(instant)

    def now(self) -> datetime.datetime:
        return self.instant


def as_utc(instant: datetime.datetime) -> datetime.datetime:
    """Return *instant* as an aware UTC datetime (naive values are taken as UTC)."""
    if instant.tzinfo is None:
        return instant.replace(tzinfo=datetime.timezone.utc)
    return instant.astimezone(datetime.timezone.utc)
