"""
Test Suite for Book Tracker

Test Organization:
- conftest.py: Shared fixtures (test database, clients, sample data)
- test_security.py: Password hashing and verification
- test_sessions.py: Session store and flash messages
- test_auth.py: Authentication strategy and /login, /register, /logout
- test_books.py: Owner-scoped data access and the book routes
- test_scenarios.py: End-to-end flows across several routes
- test_config.py: Settings validation

Running Tests:
    pytest
    pytest tests/test_books.py -v
"""
