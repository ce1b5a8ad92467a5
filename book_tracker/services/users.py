"""
User Data Access

Single-statement queries against the users table. Storage failures surface
as QueryError (see database.storage_errors).
"""

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from book_tracker.database import storage_errors
from book_tracker.models import User

logger = logging.getLogger(__name__)


def find_user_by_email(db: Session, email: str) -> User | None:
    stmt = select(User).where(User.email == email)
    with storage_errors(db, "find user by email"):
        return db.execute(stmt).scalar_one_or_none()


def find_user_by_id(db: Session, user_id: int) -> User | None:
    stmt = select(User).where(User.id == user_id)
    with storage_errors(db, "find user by id"):
        return db.execute(stmt).scalar_one_or_none()


def create_user(db: Session, username: str, email: str, hashed_password: str) -> User:
    """
    Insert a user and return the stored row (with its generated id).

    A duplicate email that slipped past the caller's check violates the
    unique index and raises QueryError.
    """
    user = User(username=username, email=email, hashed_password=hashed_password)

    with storage_errors(db, "create user"):
        db.add(user)
        db.commit()
        db.refresh(user)

    logger.info(f"New user registered: {user.email}")
    return user
