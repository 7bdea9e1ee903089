"""
Database engine management.

Provides the SQLModel engine used by the key-value store.
"""

from sqlalchemy.engine import Engine
from sqlmodel import create_engine

from loadtracker.core.config import settings


def build_engine(url: str, echo: bool = False) -> Engine:
    """Create an engine for *url*.

    SQLite connections are shared with FastAPI's worker threads.
    """
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, echo=echo, connect_args=connect_args, pool_pre_ping=True)


engine = build_engine(settings.DATABASE_URL, echo=settings.DEBUG)
