"""Database connection and session management."""

import logging
from collections.abc import Generator
from typing import Any

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker

from poetsite.core.config import Settings, settings
from poetsite.core.errors import Conflict

logger = logging.getLogger(__name__)


def _connect_args(config: Settings) -> dict[str, Any]:
    """Driver-specific connect args; Postgres gets a per-statement timeout."""
    if config.DATABASE_URL.startswith("sqlite"):
        return {"check_same_thread": False}
    if config.DB_STATEMENT_TIMEOUT_MS > 0:
        return {"options": f"-c statement_timeout={config.DB_STATEMENT_TIMEOUT_MS}"}
    return {}


def build_engine(config: Settings) -> Engine:
    """Create an engine for the configured DATABASE_URL."""
    return create_engine(
        config.DATABASE_URL,
        pool_pre_ping=True,
        echo=config.DEBUG,
        connect_args=_connect_args(config),
    )


engine = build_engine(settings)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """Dependency that yields a DB session and closes it when done."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def check_db_connected(db: Session) -> bool:
    """Run a trivial query to verify the database is reachable."""
    try:
        db.execute(text("SELECT 1"))
        return True
    except Exception:
        return False


def commit_or_conflict(db: Session, message: str) -> None:
    """Commit; a unique-constraint violation becomes Conflict (no retry)."""
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning("Commit rejected by a uniqueness constraint: %s", e.orig)
        raise Conflict(message) from e
