"""
Routers Package

Router Structure:
- auth.py: /login, /register, /logout (forms, registration, sessions)
- books.py: /home, /addNew, /detail/{id}, /add, /edit, /delete

Each router is imported and registered in main.py.
"""

from book_tracker.routers.auth import router as auth_router
from book_tracker.routers.books import router as books_router

__all__ = [
    "auth_router",
    "books_router",
]
