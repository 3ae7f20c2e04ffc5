# ---------------------------------------------------------------------------
# Author  : Railway Asset Dashboard team
# Version : 20261019v1
# ---------------------------------------------------------------------------
"""
SQLAlchemy engine, session factory and declarative base for the durable
local storage (the persisted session record lives here).
"""

from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from core.config import settings

_SQLITE_PREFIX = "sqlite:///"

if settings.database_url.startswith(_SQLITE_PREFIX):
    # SQLite creates the file but not its parent directory
    Path(settings.database_url[len(_SQLITE_PREFIX):]).parent.mkdir(parents=True, exist_ok=True)
    _connect_args = {"check_same_thread": False}
else:
    _connect_args = {}

# pool_pre_ping keeps idle connections alive across server-side timeouts
engine = create_engine(settings.database_url, pool_pre_ping=True, connect_args=_connect_args)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def init_db(bind=None):
    """Create every table known to ``Base.metadata`` that does not exist yet."""
    # Import every ORM model so that Base.metadata knows about all tables.
    import models.local_entry  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
