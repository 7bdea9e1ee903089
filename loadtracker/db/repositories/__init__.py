"""Database repositories."""

from loadtracker.db.repositories.kv_entry import KeyValueRepository

__all__ = [
    "KeyValueRepository",
]
