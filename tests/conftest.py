"""
pytest Fixtures for Book Tracker Tests

FIXTURE SCOPES:
- session scope for the engine (created once)
- function scope for database sessions (isolation between tests)

Every test runs inside a transaction that is rolled back afterwards, so
tests never see each other's users, books or sessions.
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# IMPORTANT: Set environment variables BEFORE importing the app
import os

os.environ["SESSION_SECRET"] = "test-session-secret-for-unit-tests-at-least-32-chars"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["CREATE_TABLES_ON_STARTUP"] = "false"

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from book_tracker.database import Base, get_db
from book_tracker.main import app
from book_tracker.models import Book, User
from book_tracker.services.security import hash_password

ANA_EMAIL = "a@x.com"
ANA_PASSWORD = "pw1"
BEN_EMAIL = "b@x.com"
BEN_PASSWORD = "pw2"


# =============================================================================
# DATABASE FIXTURES
# =============================================================================
@pytest.fixture(scope="session")
def engine():
    """
    SQLite in-memory engine shared by the whole test run.

    StaticPool keeps the single connection alive; without it the in-memory
    database would disappear between connections.
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    Base.metadata.create_all(bind=engine)

    yield engine

    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def db_session(engine) -> Generator[Session, None, None]:
    """
    Fresh database session wrapped in a transaction that is rolled back.
    """
    TestSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
    )

    connection = engine.connect()
    transaction = connection.begin()
    session = TestSessionLocal(bind=connection)

    yield session

    session.close()
    transaction.rollback()
    connection.close()


def _override_get_db(db_session: Session):
    def override_get_db():
        try:
            yield db_session
        finally:
            pass  # Session cleanup handled by db_session fixture

    return override_get_db


@pytest.fixture(scope="function")
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """
    Test client using the test database.

    Cookies set by the app (the session cookie) are kept by the client
    between requests, like a browser.
    """
    app.dependency_overrides[get_db] = _override_get_db(db_session)

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def other_client(client: TestClient) -> Generator[TestClient, None, None]:
    """A second browser with its own cookie jar, sharing the test database."""
    with TestClient(app) as test_client:
        yield test_client


# =============================================================================
# HELPERS
# =============================================================================
def login(client: TestClient, email: str, password: str):
    return client.post(
        "/login",
        data={"userEmail": email, "userPassword": password},
        follow_redirects=False,
    )


def book_form(**overrides) -> dict:
    form = {
        "title": "Dune",
        "author": "Herbert",
        "status": "read",
        "rate": "5",
        "notes": "classic",
    }
    form.update(overrides)
    return form


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================
@pytest.fixture
def sample_user(db_session: Session) -> User:
    user = User(
        username="ana",
        email=ANA_EMAIL,
        hashed_password=hash_password(ANA_PASSWORD),
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def second_user(db_session: Session) -> User:
    """Create a second user for testing ownership scenarios."""
    user = User(
        username="ben",
        email=BEN_EMAIL,
        hashed_password=hash_password(BEN_PASSWORD),
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def sample_book(db_session: Session, sample_user: User) -> Book:
    book = Book(
        title="Dune",
        author="Herbert",
        status="read",
        rate=5,
        notes="classic",
        user_id=sample_user.id,
    )
    db_session.add(book)
    db_session.commit()
    db_session.refresh(book)
    return book


@pytest.fixture
def other_users_book(db_session: Session, second_user: User) -> Book:
    book = Book(
        title="Emma",
        author="Austen",
        status="to-read",
        user_id=second_user.id,
    )
    db_session.add(book)
    db_session.commit()
    db_session.refresh(book)
    return book


@pytest.fixture
def auth_client(client: TestClient, sample_user: User) -> TestClient:
    """Client logged in as the sample user."""
    response = login(client, ANA_EMAIL, ANA_PASSWORD)
    assert response.headers["location"] == "/home"
    return client
