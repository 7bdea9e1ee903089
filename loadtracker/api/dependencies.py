"""
Shared API dependencies.

The session store is a process-wide singleton built on first use: tables
are created, stored sessions loaded and, on an empty store, the sample
sessions seeded.  Tests replace these through
``app.dependency_overrides``.
"""

import datetime
import logging
import threading
from typing import Optional

from fastapi import Depends, Query
from sqlalchemy.exc import SQLAlchemyError

from loadtracker.core.clock import Clock, SystemClock, as_utc
from loadtracker.core.config import settings
from loadtracker.db.init_db import init_db
from loadtracker.db.kv_store import DatabaseKeyValueStore
from loadtracker.db.session import engine
from loadtracker.services.sample_data import seed_sample_sessions
from loadtracker.services.session_service import SessionService
from loadtracker.services.session_store import SessionStore

logger = logging.getLogger(__name__)


def get_clock() -> Clock:
    return SystemClock()


_store_lock = threading.Lock()
_store: Optional[SessionStore] = None


def _build_session_store() -> SessionStore:
    """Build, load and (optionally) seed the session store."""
    try:
        init_db(engine)
    except SQLAlchemyError as e:
        logger.warning("Database unavailable, sessions will not be persisted: %s", e)

    store = SessionStore(DatabaseKeyValueStore(engine), clock=SystemClock())
    store.load()
    if settings.SEED_SAMPLE_DATA:
        seed_sample_sessions(SessionService(store))
    return store


def get_session_store() -> SessionStore:
    """Return the process-wide session store, building it on first use."""
    global _store
    with _store_lock:
        if _store is None:
            _store = _build_session_store()
        return _store


def get_session_service(store: SessionStore = Depends(get_session_store)) -> SessionService:
    return SessionService(store)


def get_reference_time(as_of: Optional[datetime.datetime] = Query(
        None, description="Reference instant (defaults to now)"), clock: Clock = Depends(get_clock),
                       ) -> datetime.datetime:
    """Resolve the ``now`` used by every metrics computation of a request."""
    return as_utc(as_of) if as_of else clock.now()
