"""
Error taxonomy.

None of these is fatal to the process:

- :class:`SessionValidationError` — a submitted record is missing a
  required field or a numeric field does not parse.  No session is
  created.
- :class:`PersistenceError` — the key-value store could not be read or
  written.  In-memory state stays authoritative.
- :class:`DeserializationError` — stored data is corrupt.  Recovered by
  resetting to an empty collection.
"""

from typing import Any, Optional


class LoadTrackerError(Exception):
    """Base class for all application errors."""


class SessionValidationError(LoadTrackerError):
    """A submitted session record failed validation."""

    def __init__(self, message: str, errors: Optional[list[dict[str, Any]]] = None):
        super().__init__(message)
        self.message = message
        self.errors = errors or []


class PersistenceError(LoadTrackerError):
    """The underlying key-value store is unavailable or a write failed."""


class DeserializationError(LoadTrackerError):
    """Stored session data could not be decoded."""
