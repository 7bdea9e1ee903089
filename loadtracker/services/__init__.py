"""Business logic services."""

from loadtracker.services.session_service import SessionService
from loadtracker.services.session_store import SessionStore

__all__ = [
    "SessionService",
    "SessionStore",
]
