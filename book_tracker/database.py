"""
Database Configuration Module

This module sets up SQLAlchemy 2.0 for the Book Tracker.

We use SYNCHRONOUS SQLAlchemy with psycopg2: every data access operation is a
single short statement, and FastAPI runs sync route handlers in its
threadpool, so requests still proceed concurrently.

Session Management Pattern
==========================
"Session per request":
1. Request arrives → create a new session
2. Use session for all database operations in that request
3. Each data access operation commits (or rolls back) on its own
4. Close session when request ends

This is implemented using FastAPI's dependency injection (get_db).
"""

import logging
from collections.abc import Generator, Iterator
from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from book_tracker.config import get_settings
from book_tracker.exceptions import QueryError

logger = logging.getLogger(__name__)
settings = get_settings()


# =============================================================================
# Database Engine
# =============================================================================
# - pool_size / max_overflow: connection pool sizing (PostgreSQL only)
# - pool_pre_ping: test connection health before using
# - echo: log all SQL statements in debug mode

def _engine_options(url: str) -> dict:
    options = {"pool_pre_ping": True, "echo": settings.debug}
    if make_url(url).get_backend_name() == "sqlite":
        options["connect_args"] = {"check_same_thread": False}
    else:
        options["pool_size"] = settings.db_pool_size
        options["max_overflow"] = settings.db_max_overflow
    return options


engine = create_engine(
    settings.sqlalchemy_database_url,
    **_engine_options(settings.sqlalchemy_database_url),
)


# =============================================================================
# Session Factory
# =============================================================================
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)


# =============================================================================
# Base Model Class
# =============================================================================
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Alembic uses Base.metadata to discover the tables for migrations.
    """
    pass


# =============================================================================
# Dependency Injection
# =============================================================================
def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI.

    Creates a session, yields it to the route handler and closes it when
    the request ends (even if an exception occurs).

    Usage in Routes:
        @router.get("/home")
        def home(db: DbSession):
            ...

    Yields:
        SQLAlchemy Session instance
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def storage_errors(db: Session, operation: str) -> Iterator[None]:
    """
    Translate SQLAlchemy failures inside the block into QueryError.

    The session is rolled back first so it stays usable for the rest of
    the request.

    Usage:
        with storage_errors(db, "list books"):
            return db.execute(stmt).scalars().all()
    """
    try:
        yield
    except SQLAlchemyError as e:
        logger.error(f"Database error during {operation}: {e}")
        db.rollback()
        raise QueryError() from e


# =============================================================================
# Utility Functions
# =============================================================================
def create_tables() -> None:
    """
    Create all database tables.

    Development and testing convenience. In production, use
    `alembic upgrade head` instead.
    """
    # Import models so they register with Base.metadata
    import book_tracker.models  # noqa: F401

    Base.metadata.create_all(bind=engine)

