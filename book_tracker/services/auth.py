"""
Authentication Service

The local email/password strategy plus login/logout session handling.

authenticate() either returns the User or raises:
- MissingCredentials / UserNotFound / IncorrectPassword: the credentials
  were rejected; the message is meant for the user (flashed on the login
  page)
- AuthError: the lookup or password comparison itself failed (HTTP 500)
"""

import logging

from fastapi import Response
from sqlalchemy.orm import Session

from book_tracker.exceptions import (
    AuthError,
    ComparisonError,
    IncorrectPassword,
    MissingCredentials,
    QueryError,
    UserNotFound,
)
from book_tracker.models import User, UserSession
from book_tracker.services.security import verify_password
from book_tracker.services.sessions import (
    clear_session_cookie,
    create_session,
    destroy_session,
    set_session_cookie,
)
from book_tracker.services.users import find_user_by_email

logger = logging.getLogger(__name__)


def authenticate(db: Session, email: str, password: str) -> User:
    """
    Validate an email/password pair.

    Args:
        db: Database session
        email: Login email (exact match)
        password: Plain text password

    Returns:
        The authenticated User

    Raises:
        MissingCredentials: Email or password is blank
        UserNotFound: No account has this email
        IncorrectPassword: The password does not match
        AuthError: The lookup or the comparison failed
    """
    if not email or not password:
        logger.warning("Login failed: missing credentials")
        raise MissingCredentials()

    try:
        user = find_user_by_email(db, email)
    except QueryError as e:
        logger.error(f"Error during authentication: {e}")
        raise AuthError() from e

    if user is None:
        logger.warning(f"Login failed: user not found for {email}")
        raise UserNotFound()

    try:
        valid = verify_password(password, user.hashed_password)
    except ComparisonError as e:
        raise AuthError() from e

    if not valid:
        logger.warning(f"Login failed: incorrect password for {email}")
        raise IncorrectPassword()

    return user


def login_user(
    db: Session,
    response: Response,
    user: User,
    current_token: str | None = None,
) -> UserSession:
    """
    Establish a session for `user` and attach its cookie to `response`.

    Any session the browser already had is destroyed first, so a token
    issued before login never becomes an authenticated one.
    """
    destroy_session(db, current_token)
    token, record = create_session(db, user_id=user.id)
    set_session_cookie(response, token)

    logger.info(f"User logged in: {user.email}")
    return record


def logout_user(db: Session, response: Response, token: str | None) -> None:
    destroy_session(db, token)
    clear_session_cookie(response)
