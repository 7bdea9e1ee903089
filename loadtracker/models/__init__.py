"""SQLModel database models."""

from loadtracker.models.kv_entry import KeyValueEntry

__all__ = [
    "KeyValueEntry",
]
