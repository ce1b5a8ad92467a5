"""
Tests for Settings validation
"""

import pytest
from pydantic import ValidationError

from book_tracker.config import Settings

SECRET = "x" * 32


class TestSettings:

    def test_database_url_built_from_pg_settings(self):
        settings = Settings(
            session_secret=SECRET,
            database_url=None,
            pg_host="db.internal",
            pg_port=5433,
            pg_database="books",
            pg_user="reader",
            pg_password="p@ss word",
        )

        url = settings.sqlalchemy_database_url

        assert url.startswith("postgresql+psycopg2://reader:")
        assert "p%40ss" in url
        assert url.endswith("@db.internal:5433/books")

    def test_database_url_override(self):
        settings = Settings(session_secret=SECRET, database_url="sqlite:///books.db")

        assert settings.sqlalchemy_database_url == "sqlite:///books.db"

    @pytest.mark.parametrize(
        "secret",
        ["short", "REPLACE_WITH_YOUR_GENERATED_SESSION_SECRET", "change-me" * 5],
    )
    def test_insecure_session_secret_rejected(self, secret):
        with pytest.raises(ValidationError):
            Settings(session_secret=secret)

    def test_log_level_normalized(self):
        assert Settings(session_secret=SECRET, log_level="debug").log_level == "DEBUG"

    def test_unknown_environment_rejected(self):
        with pytest.raises(ValidationError):
            Settings(session_secret=SECRET, environment="moon")
