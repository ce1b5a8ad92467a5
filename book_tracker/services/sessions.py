"""
Session Service

Server-side session store.

How it works:
=============
1. On login, a random token is generated and sent to the browser in an
   httpOnly cookie.
2. The sessions table stores HMAC-SHA256(session_secret, token) as the
   primary key, plus the user id and an optional flash message.
3. On each request the cookie token is hashed again and looked up; expired
   rows are ignored (and purged whenever a new session is created).
4. Logout deletes the row and the cookie.

The flash message is a single-use field on the session record: pop_flash()
returns it and clears it in the same step.
"""

import hashlib
import hmac
import logging
import secrets
from datetime import UTC, datetime, timedelta

from fastapi import Response
from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from book_tracker.config import get_settings
from book_tracker.database import storage_errors
from book_tracker.models import UserSession

logger = logging.getLogger(__name__)
settings = get_settings()

# 32 random bytes → 43 URL-safe characters
SESSION_TOKEN_BYTES = 32


def generate_session_token() -> str:
    return secrets.token_urlsafe(SESSION_TOKEN_BYTES)


def hash_session_token(token: str) -> str:
    """
    Derive the stored session id from a cookie token.

    Returns:
        64 hex characters
    """
    return hmac.new(
        settings.session_secret.encode(),
        token.encode(),
        hashlib.sha256,
    ).hexdigest()


def _now() -> datetime:
    return datetime.now(UTC)


# -------------------------------------------------------------------------
# Session Records
# -------------------------------------------------------------------------
def create_session(db: Session, user_id: int | None = None) -> tuple[str, UserSession]:
    """
    Create a new session record.

    Args:
        db: Database session
        user_id: Logged-in user, or None for an anonymous (flash-only) session

    Returns:
        Tuple of (token, record)
        - token: goes into the cookie, never stored
        - record: the persisted UserSession
    """
    purge_expired_sessions(db)

    token = generate_session_token()
    record = UserSession(
        id=hash_session_token(token),
        user_id=user_id,
        expires_at=_now() + timedelta(seconds=settings.session_max_age),
    )

    with storage_errors(db, "create session"):
        db.add(record)
        db.commit()
        db.refresh(record)

    return token, record


def get_session(db: Session, token: str | None) -> UserSession | None:
    """Return the unexpired session for a cookie token, if any."""
    if not token:
        return None

    stmt = select(UserSession).where(
        UserSession.id == hash_session_token(token),
        UserSession.expires_at > _now(),
    )
    with storage_errors(db, "load session"):
        return db.execute(stmt).scalar_one_or_none()


def destroy_session(db: Session, token: str | None) -> None:
    if not token:
        return

    stmt = (
        delete(UserSession)
        .where(UserSession.id == hash_session_token(token))
        .execution_options(synchronize_session=False)
    )
    with storage_errors(db, "destroy session"):
        db.execute(stmt)
        db.commit()


def purge_expired_sessions(db: Session) -> int:
    """
    Delete expired session rows.

    Returns:
        Number of rows removed
    """
    # Compared in SQL only; SQLite hands back naive datetimes
    stmt = (
        delete(UserSession)
        .where(UserSession.expires_at <= _now())
        .execution_options(synchronize_session=False)
    )
    with storage_errors(db, "purge sessions"):
        result = db.execute(stmt)
        db.commit()

    if result.rowcount:
        logger.debug(f"Purged {result.rowcount} expired sessions")
    return result.rowcount


# -------------------------------------------------------------------------
# Flash Messages
# -------------------------------------------------------------------------
def set_flash(db: Session, record: UserSession, message: str) -> None:
    """Attach a message to be shown on the next page view (replaces any pending one)."""
    with storage_errors(db, "set flash"):
        record.flash_message = message
        db.commit()


def pop_flash(db: Session, record: UserSession | None) -> list[str]:
    """
    Read and clear the pending flash message.

    Returns:
        [message] if one was pending, [] otherwise
    """
    if record is None or not record.flash_message:
        return []

    message = record.flash_message
    with storage_errors(db, "clear flash"):
        record.flash_message = None
        db.commit()
    return [message]


# -------------------------------------------------------------------------
# Cookie Helpers
# -------------------------------------------------------------------------
def set_session_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=settings.session_max_age,
        httponly=True,  # Not accessible via JavaScript
        secure=settings.session_cookie_secure,
        samesite="lax",
    )


def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(
        key=settings.session_cookie_name,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
    )
