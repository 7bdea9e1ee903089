"""
Session store.

Owns the canonical Track and Gym session lists.  Each list is persisted
independently, as a JSON array of flat camelCase records, under its own
key in a :class:`~loadtracker.db.kv_store.KeyValueStore`.

Failure policy
--------------
- Absent key on load → empty list.
- Corrupt data or unreadable store on load → both lists reset to empty,
  a warning is logged.
- Write failure on persist → warning logged, in-memory state stays
  authoritative.

Appends and snapshots are serialized by a lock; a snapshot is an
immutable tuple, so a metrics computation never observes a partially
appended session.
"""

import logging
import threading
from typing import Optional

from pydantic import TypeAdapter, ValidationError

from loadtracker.core.clock import Clock, SystemClock
from loadtracker.core.config import settings
from loadtracker.core.errors import DeserializationError, PersistenceError
from loadtracker.db.kv_store import KeyValueStore
from loadtracker.schemas.session import AnySession, GymSession, GymSessionList, TrackSession, TrackSessionList

logger = logging.getLogger(__name__)


class SessionStore:
    """In-memory session collection with key-value persistence."""

    def __init__(self, kv_store: KeyValueStore, clock: Optional[Clock] = None,
                 track_key: Optional[str] = None, gym_key: Optional[str] = None, ):
        self.kv_store = kv_store
        self.clock = clock or SystemClock()
        self.track_key = track_key or settings.TRACK_SESSIONS_KEY
        self.gym_key = gym_key or settings.GYM_SESSIONS_KEY

        self._track: list[TrackSession] = []
        self._gym: list[GymSession] = []
        self._last_id = 0
        self._lock = threading.RLock()

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    @property
    def track_sessions(self) -> tuple[TrackSession, ...]:
        with self._lock:
            return tuple(self._track)

    @property
    def gym_sessions(self) -> tuple[GymSession, ...]:
        with self._lock:
            return tuple(self._gym)

    def snapshot(self) -> tuple[AnySession, ...]:
        """All sessions, Track first then Gym, each in insertion order."""
        with self._lock:
            return (*self._track, *self._gym)

    def is_empty(self) -> bool:
        with self._lock:
            return not self._track and not self._gym

    def __len__(self) -> int:
        with self._lock:
            return len(self._track) + len(self._gym)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def next_id(self) -> int:
        """Issue a session id: clock milliseconds, bumped past every id seen."""
        with self._lock:
            candidate = int(self.clock.now().timestamp() * 1000)
            self._last_id = max(candidate, self._last_id + 1)
            return self._last_id

    def append(self, session: AnySession) -> bool:
        """Append *session* and persist.  Returns ``False`` if persisting failed."""
        with self._lock:
            if session.type == "Track":
                self._track.append(session)
            elif session.type == "Gym":
                self._gym.append(session)
            else:
                raise ValueError(f"Unknown session type: {session.type!r}")
            self._last_id = max(self._last_id, session.id)
            return self.persist()

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def load(self) -> None:
        """Replace the in-memory lists with the stored ones (fail-soft)."""
        with self._lock:
            try:
                track = self._read(self.track_key, TrackSessionList)
                gym = self._read(self.gym_key, GymSessionList)
            except (PersistenceError, DeserializationError) as e:
                logger.warning("Unable to load stored sessions, starting empty: %s", e)
                track, gym = [], []

            self._track = list(track)
            self._gym = list(gym)
            self._last_id = max((s.id for s in (*self._track, *self._gym)), default=0)
            logger.info("Loaded %d track and %d gym sessions", len(self._track), len(self._gym))

    def persist(self) -> bool:
        """Write both lists.  Failures are logged, never raised."""
        with self._lock:
            track_json = TrackSessionList.dump_json(self._track, by_alias=True).decode()
            gym_json = GymSessionList.dump_json(self._gym, by_alias=True).decode()
            try:
                self.kv_store.set(self.track_key, track_json)
                self.kv_store.set(self.gym_key, gym_json)
            except PersistenceError as e:
                logger.warning("Unable to save sessions, keeping in-memory state: %s", e)
                return False
            return True

    def _read(self, key: str, adapter: TypeAdapter) -> list:
        raw = self.kv_store.get(key)
        if raw is None:
            return []
        try:
            return adapter.validate_json(raw)
        except ValidationError as e:
            raise DeserializationError(f"Corrupt data under '{key}': {e}") from e
