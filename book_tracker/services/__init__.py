"""
Services Package

Business logic kept separate from HTTP handling (routers).

Current services:
- security.py: Password hashing and verification (bcrypt)
- sessions.py: Server-side session store, flash messages, session cookie
- auth.py: Email/password authentication, login and logout
- users.py: Data access for the users table
- books.py: Owner-scoped data access for the book table
"""
