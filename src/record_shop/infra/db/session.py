from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from record_shop.infra.db.config import (
    database_max_overflow,
    database_pool_size,
    database_url,
)

# Lazy initialization - only create engine/session when needed
_engine: Engine | None = None
_session_local: sessionmaker[Session] | None = None


def get_engine() -> Engine:
    """
    Get or create the database engine (lazy initialization).

    Connection Pool Configuration:
    - pool_size: Number of connections to keep open (DATABASE_POOL_SIZE)
    - max_overflow: Additional connections allowed beyond pool_size (DATABASE_MAX_OVERFLOW)
    - pool_pre_ping: Verify connection health before use
    - pool_recycle: Recycle connections after N seconds

    Total max connections = pool_size + max_overflow
    """
    global _engine
    if _engine is None:
        _engine = create_engine(
            database_url(),
            pool_size=database_pool_size(),
            max_overflow=database_max_overflow(),
            pool_pre_ping=True,
            pool_recycle=3600,
        )
    return _engine


def get_session_local() -> sessionmaker[Session]:
    """Get or create the session factory (lazy initialization)."""
    global _session_local
    if _session_local is None:
        _session_local = sessionmaker(
            bind=get_engine(),
            class_=Session,
            expire_on_commit=False,
        )
    return _session_local


@contextmanager
def get_session() -> Iterator[Session]:
    """Read-scoped session: commit on success, rollback on exception, always close."""
    session = get_session_local()()

    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
