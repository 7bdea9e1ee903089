"""
Key-value stores backing the session store.

A store maps string keys to string values.  Absent keys read as
``None``.  Failures of the underlying storage surface as
:class:`~loadtracker.core.errors.PersistenceError`; callers decide how
fail-soft to be.
"""

from typing import Optional, Protocol

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from loadtracker.core.errors import PersistenceError
from loadtracker.db.repositories.kv_entry import KeyValueRepository


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class InMemoryKeyValueStore:
    """Process-local store, used for tests and ephemeral runs."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class DatabaseKeyValueStore:
    """Store backed by the ``kv_entries`` table."""

    def __init__(self, engine: Engine):
        self.engine = engine

    def get(self, key: str) -> Optional[str]:
        try:
            with Session(self.engine) as session:
                entry = KeyValueRepository(session).get(key)
                return entry.value if entry else None
        except SQLAlchemyError as e:
            raise PersistenceError(f"Unable to read '{key}': {e}") from e

    def set(self, key: str, value: str) -> None:
        try:
            with Session(self.engine) as session:
                KeyValueRepository(session).upsert(key, value)
        except SQLAlchemyError as e:
            raise PersistenceError(f"Unable to write '{key}': {e}") from e
