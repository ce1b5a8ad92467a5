"""
Application Configuration Module

This module uses Pydantic Settings for type-safe configuration management.

Settings are read from environment variables (case-insensitive) and fall back
to a .env file for local development. Invalid values fail at startup, not in
the middle of a request.

The database connection is described by the classic PG_* variables
(PG_HOST, PG_PORT, PG_DATABASE, PG_USER, PG_PASSWORD). DATABASE_URL, when
set, overrides them entirely (handy for tests and for managed databases that
hand out a single URL).

Usage:
    from book_tracker.config import get_settings

    settings = get_settings()
    print(settings.sqlalchemy_database_url)
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    SECURITY NOTE:
    ==============
    session_secret has a validator: placeholder values or short secrets
    raise an error at startup.
    """

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------
    app_name: str = Field(
        default="Book Tracker",
        description="Application name displayed in docs and logs"
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version reported by /health"
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode (detailed errors, SQL echo, auto-reload)"
    )
    host: str = Field(
        default="0.0.0.0",
        description="Host to bind the server to"
    )
    port: int = Field(
        default=3000,
        description="Port to bind the server to"
    )
    environment: str = Field(
        default="development",
        description="Environment: development, staging, production"
    )

    # -------------------------------------------------------------------------
    # Database Settings
    # -------------------------------------------------------------------------
    pg_host: str = Field(default="localhost", description="PostgreSQL host")
    pg_port: int = Field(default=5432, description="PostgreSQL port")
    pg_database: str = Field(default="book_tracker", description="Database name")
    pg_user: str = Field(default="postgres", description="Database user")
    pg_password: str = Field(default="", description="Database password")

    database_url: str | None = Field(
        default=None,
        description="Full SQLAlchemy URL; overrides the PG_* settings when set"
    )
    db_pool_size: int = Field(
        default=5,
        description="Number of permanent database connections"
    )
    db_max_overflow: int = Field(
        default=10,
        description="Maximum additional connections during high load"
    )
    create_tables_on_startup: bool = Field(
        default=False,
        description="Create missing tables at startup (development only)"
    )

    # -------------------------------------------------------------------------
    # Session Settings
    # -------------------------------------------------------------------------
    session_secret: str = Field(
        default="REPLACE_WITH_YOUR_GENERATED_SESSION_SECRET",
        description="Secret used to derive stored session identifiers"
    )
    session_cookie_name: str = Field(
        default="book_tracker_session",
        description="Name of the session cookie"
    )
    session_max_age: int = Field(
        default=7 * 24 * 60 * 60,
        ge=60,
        description="Session lifetime in seconds"
    )
    session_cookie_secure: bool = Field(
        default=False,
        description="Only send the session cookie over HTTPS"
    )

    # -------------------------------------------------------------------------
    # Logging Settings
    # -------------------------------------------------------------------------
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------
    @property
    def sqlalchemy_database_url(self) -> str:
        """
        Connection URL handed to create_engine().

        Built from the PG_* fields with URL.create() so that passwords with
        special characters are escaped correctly.
        """
        if self.database_url:
            return self.database_url

        url = URL.create(
            drivername="postgresql+psycopg2",
            username=self.pg_user,
            password=self.pg_password or None,
            host=self.pg_host,
            port=self.pg_port,
            database=self.pg_database,
        )
        return url.render_as_string(hide_password=False)

    # -------------------------------------------------------------------------
    # Validators
    # -------------------------------------------------------------------------
    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate that log_level is a valid Python logging level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v.upper()

    @field_validator("session_secret")
    @classmethod
    def validate_session_secret(cls, v: str) -> str:
        """
        Reject placeholder or short session secrets.

        The application will fail to start if SESSION_SECRET is not
        properly set.

        Raises:
            ValueError: If the secret is a placeholder or too short
        """
        placeholder_indicators = [
            "REPLACE_WITH",
            "change-me",
            "your-secret",
            "generate-with",
        ]

        for indicator in placeholder_indicators:
            if indicator.lower() in v.lower():
                raise ValueError(
                    "SESSION_SECRET contains a placeholder value. "
                    "Generate a secure value with: openssl rand -hex 32"
                )

        if len(v) < 32:
            raise ValueError(
                "SESSION_SECRET must be at least 32 characters long. "
                "Generate a secure value with: openssl rand -hex 32"
            )

        return v

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment is a known value."""
        valid_envs = {"development", "staging", "production"}
        if v.lower() not in valid_envs:
            raise ValueError(f"environment must be one of {valid_envs}")
        return v.lower()


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings.

    lru_cache turns this into a singleton: the first call reads the
    environment and .env, later calls return the same instance.

    Returns:
        Cached Settings instance
    """
    return Settings()
