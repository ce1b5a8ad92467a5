"""
Pydantic Schemas Package

Schemas validate form input and shape the JSON views returned by routes.

- BookForm: fields submitted by the add/edit forms
- BookResponse: a book as shown in the list and detail views
- UserResponse: public user data (never exposes the password hash)
- *View: one model per page (see views.py)
"""

from book_tracker.schemas.book import BookForm, BookResponse
from book_tracker.schemas.user import UserResponse
from book_tracker.schemas.views import (
    AddNewView,
    BookDetailView,
    HomeView,
    IndexView,
    LoginView,
    RegisterView,
)

__all__ = [
    "BookForm",
    "BookResponse",
    "UserResponse",
    "IndexView",
    "LoginView",
    "RegisterView",
    "HomeView",
    "AddNewView",
    "BookDetailView",
]
