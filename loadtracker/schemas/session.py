"""
Training session schemas.

A session is a tagged union over two variants, discriminated by the
``type`` field:

- ``Track`` — throwing / track sessions (event, implement, throws)
- ``Gym``   — strength sessions (exercise, sets x reps x weight)

Python attributes are snake_case; the JSON representation (API and
storage) uses camelCase keys, e.g. ``trainingLoad`` or ``implementWeight``.

``*Create`` schemas describe what the form collaborator submits.  The
stored variants add the id and the derived loads, and are frozen: a
session's date never changes once created.
"""

import datetime
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator
from pydantic.alias_generators import to_camel


class _SessionBase(BaseModel):
    """Fields shared by both session variants."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, str_strip_whitespace=True)

    date: datetime.date = Field(..., description="Calendar day of the session")
    session_type: str = Field(..., min_length=1, description="Free-text category, e.g. 'Technical'")
    duration: int = Field(..., gt=0, description="Duration in minutes")
    rpe: int = Field(..., ge=1, le=10, description="Rate of perceived exertion (1-10)")
    notes: str = Field("", description="Optional session notes")

    @field_validator("notes", mode="before")
    @classmethod
    def _empty_notes(cls, value: Optional[str]) -> str:
        return "" if value is None else value


class TrackSessionCreate(_SessionBase):
    """Schema for logging a track / throwing session."""

    event: str = Field(..., min_length=1, description="Event, e.g. 'Shot Put'")
    implement_weight: float = Field(..., gt=0, description="Implement weight in kg")
    total_throws: int = Field(..., gt=0, description="Number of throws")
    best_throw: float = Field(0.0, ge=0, description="Best throw in metres (0 when not measured)")

    @field_validator("best_throw", mode="before")
    @classmethod
    def _blank_best_throw(cls, value):
        # Forms submit an empty string when the field is left blank.
        if value is None or value == "":
            return 0.0
        return value


class GymSessionCreate(_SessionBase):
    """Schema for logging a gym / strength session."""

    exercise: str = Field(..., min_length=1, description="Exercise, e.g. 'Back Squat'")
    sets: int = Field(..., gt=0, description="Number of sets")
    reps: int = Field(..., gt=0, description="Repetitions per set")
    weight: float = Field(..., gt=0, description="Weight in kg")


class TrackSession(TrackSessionCreate):
    """A stored track session."""

    model_config = ConfigDict(frozen=True)

    id: int
    type: Literal["Track"] = "Track"
    training_load: float = Field(..., ge=0, description="rpe x duration")


class GymSession(GymSessionCreate):
    """A stored gym session."""

    model_config = ConfigDict(frozen=True)

    id: int
    type: Literal["Gym"] = "Gym"
    training_load: float = Field(..., ge=0, description="rpe x duration")
    volume_load: float = Field(..., ge=0, description="sets x reps x weight")


AnySession = Union[TrackSession, GymSession]
SessionRecord = Annotated[AnySession, Field(discriminator="type")]

TrackSessionList = TypeAdapter(list[TrackSession])
GymSessionList = TypeAdapter(list[GymSession])


class RecentSessionRow(BaseModel):
    """One row of the recent-sessions listing."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    date: datetime.date
    type: Literal["Track", "Gym"]
    session_type: str
    activity: str = Field(..., description="One-line summary, e.g. 'Shot Put (25 throws)'")
    training_load: float
    rpe: int
    duration: int
