"""
Key-value entry database model.

The session store persists each session list as one JSON document
under its own key, so a single ``key -> text`` table is enough.
"""

import datetime

from sqlalchemy import Column, Text
from sqlmodel import Field, SQLModel


def _utcnow() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


class KeyValueEntry(SQLModel, table=True):
    """A single stored value."""

    __tablename__ = "kv_entries"

    key: str = Field(primary_key=True, max_length=100)
    value: str = Field(sa_column=Column(Text, nullable=False))

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=_utcnow)
    updated_at: datetime.datetime = Field(default_factory=_utcnow)
