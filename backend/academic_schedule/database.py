"""
Database engine, session factory, and metadata shared across the application.
"""

from __future__ import annotations

from datetime import datetime
import logging
from typing import Any, Generator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from academic_schedule.core.config import settings

logger = logging.getLogger(__name__)

_DEFAULT_POOL_KWARGS: dict[str, Any] = {
    "pool_size": 5,
    "max_overflow": 10,
    "pool_timeout": 5,
    "pool_recycle": 300,
    "pool_pre_ping": True,
}


def build_engine(db_url: str, *, echo: bool = False, **engine_kwargs: Any) -> Engine:
    """Create an engine with dialect-appropriate connection settings."""

    if db_url.startswith("sqlite"):
        # check_same_thread=False: FastAPI serves sync routes from a thread pool
        new_engine = create_engine(
            db_url, echo=echo, connect_args={"check_same_thread": False}, **engine_kwargs
        )
        event.listen(new_engine, "connect", _enable_sqlite_foreign_keys)
    else:
        new_engine = create_engine(db_url, echo=echo, **{**_DEFAULT_POOL_KWARGS, **engine_kwargs})

    event.listen(new_engine, "connect", _receive_connect)
    return new_engine


def _enable_sqlite_foreign_keys(dbapi_connection: Any, _connection_record: Any) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def _receive_connect(dbapi_connection: Any, connection_record: Any) -> None:
    connection_record.info["connect_time"] = datetime.now()
    logger.debug("Database connection established")


engine: Engine = build_engine(settings.database_url, echo=settings.database_echo)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine, expire_on_commit=False)

Base = declarative_base()


def get_db() -> Generator[Session, None, None]:
    """Get database session with proper cleanup."""
    db = SessionLocal()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def get_dialect_name(db: Session) -> str:
    bind = db.get_bind()
    return bind.dialect.name if bind is not None else ""
