"""
Key-value repository.

Handles database operations for :class:`KeyValueEntry`.
"""

import datetime
from typing import Optional

from sqlmodel import Session

from loadtracker.models.kv_entry import KeyValueEntry


class KeyValueRepository:
    """Repository for KeyValueEntry database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get(self, key: str) -> Optional[KeyValueEntry]:
        return self.session.get(KeyValueEntry, key)

    def upsert(self, key: str, value: str) -> KeyValueEntry:
        entry = self.get(key)
        if entry is None:
            entry = KeyValueEntry(key=key, value=value)
        else:
            entry.value = value
            entry.updated_at = datetime.datetime.now(datetime.timezone.utc)
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry
