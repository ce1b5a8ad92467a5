"""
Authentication Router

Handles account and session endpoints:
- Login and registration forms
- Registration (creates the user and logs them in)
- Login (email/password → server-side session)
- Logout

Security:
=========
- Passwords are hashed with bcrypt before storage
- Plain text passwords are never logged or stored
- The browser only holds an opaque session token (httpOnly cookie)
- A failed login leaves the user anonymous; the reason is flashed once
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Form, status
from fastapi.responses import RedirectResponse

from book_tracker.dependencies import CurrentSession, DbSession, SessionToken
from book_tracker.exceptions import AuthenticationFailure
from book_tracker.schemas import LoginView, RegisterView
from book_tracker.services.auth import authenticate, login_user, logout_user
from book_tracker.services.security import hash_password
from book_tracker.services.sessions import (
    create_session,
    pop_flash,
    set_flash,
    set_session_cookie,
)
from book_tracker.services.users import create_user, find_user_by_email

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Authentication"],
    responses={
        302: {"description": "Redirect after form submission"},
        500: {"description": "Server error"},
    },
)


# -------------------------------------------------------------------------
# Forms
# -------------------------------------------------------------------------
@router.get(
    "/login",
    response_model=LoginView,
    summary="Login form",
)
def login_form(db: DbSession, record: CurrentSession) -> LoginView:
    """Show the login form with any pending flash message (consumed here)."""
    return LoginView(messages=pop_flash(db, record))


@router.get(
    "/register",
    response_model=RegisterView,
    summary="Registration form",
)
def register_form() -> RegisterView:
    return RegisterView()


# -------------------------------------------------------------------------
# Registration Endpoint
# -------------------------------------------------------------------------
@router.post(
    "/register",
    summary="Register a new user",
    status_code=status.HTTP_302_FOUND,
)
def register(
    db: DbSession,
    token: SessionToken,
    user_name: Annotated[str, Form(alias="userName")],
    user_email: Annotated[str, Form(alias="userEmail")],
    user_password: Annotated[str, Form(alias="userPassword")],
) -> RedirectResponse:
    """
    Register a new user with email and password.

    1. An already registered email sends the visitor to the login page
    2. Otherwise the password is hashed and the user created
    3. The new user is logged in and sent to their book list

    Hashing or insert failures propagate to the 500 handlers.
    """
    if find_user_by_email(db, user_email) is not None:
        logger.info(f"Registration with existing email {user_email}, redirecting to login")
        return RedirectResponse("/login", status_code=status.HTTP_302_FOUND)

    user = create_user(
        db,
        username=user_name,
        email=user_email,
        hashed_password=hash_password(user_password),
    )

    response = RedirectResponse("/home", status_code=status.HTTP_302_FOUND)
    login_user(db, response, user, current_token=token)
    return response


# -------------------------------------------------------------------------
# Login Endpoint
# -------------------------------------------------------------------------
@router.post(
    "/login",
    summary="Login with email and password",
    status_code=status.HTTP_302_FOUND,
)
def login(
    db: DbSession,
    token: SessionToken,
    record: CurrentSession,
    user_email: Annotated[str, Form(alias="userEmail")] = "",
    user_password: Annotated[str, Form(alias="userPassword")] = "",
) -> RedirectResponse:
    """
    Authenticate and start a session.

    On rejected or blank credentials the reason ("Missing credentials",
    "User not found." or "Incorrect password.") is flashed and the visitor
    goes back to the login form. Visitors without a session get an
    anonymous one to carry the message.
    """
    try:
        user = authenticate(db, user_email, user_password)
    except AuthenticationFailure as e:
        response = RedirectResponse("/login", status_code=status.HTTP_302_FOUND)
        if record is None:
            new_token, record = create_session(db)
            set_session_cookie(response, new_token)
        set_flash(db, record, e.message)
        return response

    response = RedirectResponse("/home", status_code=status.HTTP_302_FOUND)
    login_user(db, response, user, current_token=token)
    return response


# -------------------------------------------------------------------------
# Logout Endpoint
# -------------------------------------------------------------------------
@router.get(
    "/logout",
    summary="Logout",
    status_code=status.HTTP_302_FOUND,
)
def logout(db: DbSession, token: SessionToken) -> RedirectResponse:
    response = RedirectResponse("/", status_code=status.HTTP_302_FOUND)
    logout_user(db, response, token)
    logger.info("User logged out")
    return response
