"""
Book Tracker Application Package

A personal book-tracking web application: users register, log in with a
server-side session and manage a private list of books.

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: SQLAlchemy database connection and session management
- exceptions.py: Error taxonomy shared by services and routes
- main.py: FastAPI application factory and configuration
- dependencies.py: Dependency injection functions (db session, current user)
- models/: SQLAlchemy ORM models (users, book, sessions)
- schemas/: Pydantic form and view schemas
- routers/: Route handlers
- services/: Password hashing, sessions, authentication, data access
"""

__version__ = "0.1.0"
