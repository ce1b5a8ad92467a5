"""
Application Exceptions

Error taxonomy shared by the services and the routers.

    BookTrackerError
    ├── CredentialError
    │   ├── HashingError          bcrypt failed while hashing
    │   └── ComparisonError       bcrypt failed while verifying
    ├── QueryError                any storage fault (HTTP 500)
    │   └── AuthError             storage fault during authentication
    ├── AuthenticationFailure     bad credentials (flash + redirect)
    │   ├── MissingCredentials
    │   ├── UserNotFound
    │   └── IncorrectPassword
    ├── NotFoundError             book missing or owned by someone else (404)
    └── LoginRequired             no authenticated user (redirect to /)

Exception handlers in main.py translate these into responses, so routes and
services just raise.
"""


class BookTrackerError(Exception):
    """Base class for all application errors."""


# -------------------------------------------------------------------------
# Credential Store
# -------------------------------------------------------------------------
class CredentialError(BookTrackerError):
    """Password hashing backend failed (not a wrong password)."""


class HashingError(CredentialError):
    pass


class ComparisonError(CredentialError):
    pass


# -------------------------------------------------------------------------
# Storage
# -------------------------------------------------------------------------
class QueryError(BookTrackerError):
    """
    A database statement failed.

    `message` is the user-facing text of the 500 response; routes that want
    a specific wording raise a new QueryError chained to this one.
    """

    default_message = "Server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class AuthError(QueryError):
    """Authentication could not complete because of a backend failure."""


# -------------------------------------------------------------------------
# Authentication
# -------------------------------------------------------------------------
class AuthenticationFailure(BookTrackerError):
    """Credentials were rejected. `message` is shown to the user."""

    message = "Authentication failed."

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class MissingCredentials(AuthenticationFailure):
    message = "Missing credentials"


class UserNotFound(AuthenticationFailure):
    message = "User not found."


class IncorrectPassword(AuthenticationFailure):
    message = "Incorrect password."


# -------------------------------------------------------------------------
# Routing
# -------------------------------------------------------------------------
class NotFoundError(BookTrackerError):
    def __init__(self, message: str = "Book not found") -> None:
        self.message = message
        super().__init__(message)


class LoginRequired(BookTrackerError):
    """Raised by the authentication gate when no user is logged in."""
