"""
Session service.

The form collaborator: validates a raw submitted record against the
variant's schema, derives its loads and appends it to the store.  A
record with a missing or unparsable required field is rejected with
:class:`~loadtracker.core.errors.SessionValidationError` and nothing is
stored.
"""

import logging
from typing import Any, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from loadtracker.core.errors import SessionValidationError
from loadtracker.metrics.load import compute_training_load, compute_volume_load
from loadtracker.schemas.session import (
    AnySession,
    GymSession,
    GymSessionCreate,
    RecentSessionRow,
    TrackSession,
    TrackSessionCreate,
)
from loadtracker.services.session_store import SessionStore

logger = logging.getLogger(__name__)

REQUIRED_FIELDS_MESSAGE = "Please fill in all required fields."

M = TypeVar("M", bound=BaseModel)


class SessionService:
    """Service for session logging and listing."""

    def __init__(self, store: SessionStore):
        self.store = store

    def log_track(self, payload: dict[str, Any]) -> TrackSession:
        return self.create_track(_validate(TrackSessionCreate, payload))

    def log_gym(self, payload: dict[str, Any]) -> GymSession:
        return self.create_gym(_validate(GymSessionCreate, payload))

    def create_track(self, data: TrackSessionCreate) -> TrackSession:
        session = TrackSession(**data.model_dump(), id=self.store.next_id(),
                               training_load=compute_training_load(data.rpe, data.duration), )
        self.store.append(session)
        logger.info("Logged track session %d (%s, load %.0f)", session.id, session.event, session.training_load)
        return session

    def create_gym(self, data: GymSessionCreate) -> GymSession:
        session = GymSession(**data.model_dump(), id=self.store.next_id(),
                             training_load=compute_training_load(data.rpe, data.duration),
                             volume_load=compute_volume_load(data.sets, data.reps, data.weight), )
        self.store.append(session)
        logger.info("Logged gym session %d (%s, load %.0f)", session.id, session.exercise, session.training_load)
        return session

    def recent(self, limit: Optional[int] = None) -> list[RecentSessionRow]:
        """Most recent sessions first (by date), at most *limit* rows."""
        sessions = sorted(self.store.snapshot(), key=lambda s: s.date, reverse=True)
        if limit is not None:
            sessions = sessions[:limit]
        return [_to_row(s) for s in sessions]


# ----------------------------------------------------------------------
# Helpers
# ----------------------------------------------------------------------


def _validate(schema: Type[M], payload: dict[str, Any]) -> M:
    try:
        return schema.model_validate(payload)
    except ValidationError as e:
        raise SessionValidationError(REQUIRED_FIELDS_MESSAGE, errors=e.errors(include_url=False, include_context=False,
                                                                               include_input=False)) from e


def describe_activity(session: AnySession) -> str:
    """One-line summary, e.g. ``'Shot Put (25 throws)'`` or ``'Back Squat (4x5@120kg)'``."""
    if session.type == "Track":
        return f"{session.event} ({session.total_throws} throws)"
    if session.type == "Gym":
        return f"{session.exercise} ({session.sets}x{session.reps}@{session.weight:g}kg)"
    raise ValueError(f"Unknown session type: {session.type!r}")


def _to_row(session: AnySession) -> RecentSessionRow:
    return RecentSessionRow(id=session.id, date=session.date, type=session.type, session_type=session.session_type,
                            activity=describe_activity(session), training_load=session.training_load,
                            rpe=session.rpe, duration=session.duration, )
