"""
Security Service

Password hashing and verification (the credential store).

Security Features:
==================
1. Password hashing with bcrypt (passlib), cost factor 10
2. Constant-time verification
3. Backend failures surface as typed errors, distinct from a wrong password

Usage:
    from book_tracker.services.security import hash_password, verify_password

    hashed = hash_password("pw1")
    verify_password("pw1", hashed)    # True
    verify_password("nope", hashed)   # False
"""

import logging

from passlib.context import CryptContext

from book_tracker.exceptions import ComparisonError, HashingError

logger = logging.getLogger(__name__)

BCRYPT_ROUNDS = 10

# -------------------------------------------------------------------------
# Password Hashing Configuration
# -------------------------------------------------------------------------
# - schemes: bcrypt only
# - deprecated: "auto" means old hashes are flagged for upgrade
# - bcrypt__rounds: work factor (2^10 iterations)
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=BCRYPT_ROUNDS,
)


def hash_password(password: str) -> str:
    """
    Hash a plain text password using bcrypt.

    Args:
        password: Plain text password

    Returns:
        Bcrypt hash of the password (salt included)

    Raises:
        HashingError: If the bcrypt backend fails

    Example:
        >>> hash_password("pw1").startswith("$2b$10$")
        True
    """
    try:
        return pwd_context.hash(password)
    except (ValueError, TypeError) as e:
        logger.error(f"Error hashing password: {e}")
        raise HashingError("Error hashing password") from e


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a stored bcrypt hash.

    Args:
        plain_password: The password to verify
        hashed_password: The stored bcrypt hash

    Returns:
        True if password matches, False otherwise

    Raises:
        ComparisonError: If the stored hash is malformed or the backend fails
    """
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError) as e:
        logger.error(f"Error comparing passwords: {e}")
        raise ComparisonError("Error comparing passwords") from e
