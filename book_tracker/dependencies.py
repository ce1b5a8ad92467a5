"""
FastAPI Dependencies Module

Dependencies are reusable components injected into route handlers.

Session resolution chain:
    cookie token → UserSession record → User

- get_session_token: raw token from the session cookie
- get_current_session: the unexpired session record, or None
- get_optional_current_user: the logged-in user, or None (fails open when
  the record or the user row is missing)
- ensure_authenticated: the gate for per-user routes; raises LoginRequired,
  which main.py turns into a redirect to the landing page
"""

import logging
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from book_tracker.config import get_settings
from book_tracker.database import get_db
from book_tracker.exceptions import LoginRequired
from book_tracker.models import User, UserSession
from book_tracker.services.sessions import get_session
from book_tracker.services.users import find_user_by_id

logger = logging.getLogger(__name__)
settings = get_settings()

# =============================================================================
# Type Aliases with Annotated
# =============================================================================
DbSession = Annotated[Session, Depends(get_db)]


# =============================================================================
# Session Resolution
# =============================================================================
def get_session_token(request: Request) -> str | None:
    return request.cookies.get(settings.session_cookie_name)


SessionToken = Annotated[str | None, Depends(get_session_token)]


def get_current_session(token: SessionToken, db: DbSession) -> UserSession | None:
    """
    Load the session record referenced by the cookie.

    Returns:
        UserSession if the cookie names an unexpired session, None otherwise
    """
    return get_session(db, token)


CurrentSession = Annotated[UserSession | None, Depends(get_current_session)]


def get_optional_current_user(record: CurrentSession, db: DbSession) -> User | None:
    """
    Get the logged-in user, or None for anonymous requests.

    A session whose user row no longer exists is treated as anonymous
    rather than as an error.
    """
    if record is None or record.user_id is None:
        return None

    user = find_user_by_id(db, record.user_id)
    if user is None:
        logger.warning(f"Session refers to missing user {record.user_id}")
    return user


OptionalUser = Annotated[User | None, Depends(get_optional_current_user)]


# =============================================================================
# Authentication Gate
# =============================================================================
def ensure_authenticated(user: OptionalUser) -> User:
    """
    Require a logged-in user.

    Use on every route that reads or writes per-user state.

    Raises:
        LoginRequired: No authenticated user (redirects to /)
    """
    if user is None:
        raise LoginRequired()
    return user


CurrentUser = Annotated[User, Depends(ensure_authenticated)]
