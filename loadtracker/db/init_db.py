"""
Database initialization.

Creates all tables.
"""

import logging
from typing import Optional

from sqlalchemy.engine import Engine
from sqlmodel import SQLModel

logger = logging.getLogger(__name__)


def init_db(bind: Optional[Engine] = None) -> None:
    """Create all SQLModel tables on *bind* (default engine if omitted)."""

    # Import all models so SQLModel.metadata has them
    from loadtracker.models.kv_entry import KeyValueEntry  # noqa: F401

    if bind is None:
        from loadtracker.db.session import engine as bind

    SQLModel.metadata.create_all(bind)
    logger.info("Database tables ready on %s", bind.url)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    init_db()
