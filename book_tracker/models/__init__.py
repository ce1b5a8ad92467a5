"""
SQLAlchemy Models Package

Model Relationships:
- User -> Book: One-to-Many (a user owns a private list of books)
- User -> UserSession: One-to-Many (one row per logged-in browser)

Import all models here so that Alembic discovers them and callers can write
`from book_tracker.models import Book, User`.
"""

from book_tracker.models.user import User
from book_tracker.models.book import Book
from book_tracker.models.session import UserSession

__all__ = [
    "User",
    "Book",
    "UserSession",
]
