"""
FastAPI Application Entry Point

This module creates and configures the FastAPI application.

Key Concepts:
=============

1. Application Factory Pattern
   - create_app() returns a configured app (tests can build their own)

2. Lifespan Events
   - startup: log configuration, optionally create tables
   - shutdown: dispose of the connection pool

3. Exception Handlers
   - Routes and services raise typed exceptions (book_tracker.exceptions)
   - Handlers here turn them into redirects, 404s and 500s
   - Storage errors are logged with their cause, users see a generic text
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse, RedirectResponse
from sqlalchemy.exc import SQLAlchemyError

from book_tracker.config import get_settings
from book_tracker.database import create_tables, engine
from book_tracker.dependencies import OptionalUser
from book_tracker.exceptions import (
    CredentialError,
    LoginRequired,
    NotFoundError,
    QueryError,
)
from book_tracker.routers import auth_router, books_router
from book_tracker.schemas import IndexView

# =============================================================================
# Logging Configuration
# =============================================================================
settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


# =============================================================================
# Lifespan Events
# =============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Code before yield: Runs on startup
    Code after yield: Runs on shutdown
    """
    logger.info(f"Starting {settings.app_name}...")
    logger.info(f"Environment: {settings.environment}, debug mode: {settings.debug}")

    if settings.create_tables_on_startup:
        logger.warning("Creating missing tables (use Alembic migrations in production)")
        create_tables()

    yield

    logger.info(f"Shutting down {settings.app_name}...")
    engine.dispose()


# =============================================================================
# Application Factory
# =============================================================================
def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.app_name,
        description="""
## Book Tracker

Keep a private list of the books you read.

### Authentication
Register or log in with email and password; the session is kept in an
httpOnly cookie. Pages that show your books redirect to `/` when you are
not logged in.

### Pages
Each page answers with a JSON view model (`{"view": ..., ...}`).
        """,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------
    @app.exception_handler(LoginRequired)
    async def login_required_handler(
        request: Request,
        exc: LoginRequired,
    ) -> RedirectResponse:
        """Anonymous visitor on a per-user page: back to the landing page."""
        logger.debug(f"Anonymous request to {request.url.path}, redirecting to /")
        return RedirectResponse("/", status_code=status.HTTP_302_FOUND)

    @app.exception_handler(NotFoundError)
    async def not_found_handler(
        request: Request,
        exc: NotFoundError,
    ) -> PlainTextResponse:
        return PlainTextResponse(exc.message, status_code=status.HTTP_404_NOT_FOUND)

    @app.exception_handler(QueryError)
    async def query_error_handler(
        request: Request,
        exc: QueryError,
    ) -> PlainTextResponse:
        """
        Storage failed while serving the request.

        The cause is logged; the user only sees the route's message.
        """
        logger.error(f"Query error on {request.url.path}: {exc.message}", exc_info=exc)
        return PlainTextResponse(
            exc.message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    @app.exception_handler(CredentialError)
    async def credential_error_handler(
        request: Request,
        exc: CredentialError,
    ) -> PlainTextResponse:
        logger.error(f"Password backend error on {request.url.path}: {exc}", exc_info=exc)
        return PlainTextResponse(
            "Server error",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    @app.exception_handler(SQLAlchemyError)
    async def sqlalchemy_exception_handler(
        request: Request,
        exc: SQLAlchemyError,
    ) -> PlainTextResponse:
        """Database errors that escaped the data access layer."""
        logger.error(f"Database error: {exc}")
        return PlainTextResponse(
            "A database error occurred. Please try again later.",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> PlainTextResponse:
        """
        Catch-all exception handler.

        In production, hide internal errors from users.
        In debug mode, show more details.
        """
        logger.error(f"Unhandled error: {exc}", exc_info=True)

        detail = str(exc) if settings.debug else "An internal error occurred."
        return PlainTextResponse(
            detail,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    # -------------------------------------------------------------------------
    # Register Routers
    # -------------------------------------------------------------------------
    app.include_router(auth_router)
    app.include_router(books_router)

    # -------------------------------------------------------------------------
    # Landing Page and Health Check
    # -------------------------------------------------------------------------
    @app.get(
        "/",
        tags=["Root"],
        response_model=IndexView,
        summary="Landing page",
        description="Logged-in users are sent to their book list.",
    )
    def index(user: OptionalUser):
        if user is not None:
            return RedirectResponse("/home", status_code=status.HTTP_302_FOUND)
        return IndexView()

    @app.get(
        "/health",
        tags=["Health"],
        summary="Health check",
    )
    async def health_check() -> dict:
        """Used by load balancers and monitoring to check the instance is up."""
        return {
            "status": "healthy",
            "app": settings.app_name,
            "version": settings.app_version,
        }

    return app


# =============================================================================
# Application Instance
# =============================================================================
# This is what uvicorn imports: uvicorn book_tracker.main:app

app = create_app()


# =============================================================================
# Development Server
# =============================================================================
# python -m book_tracker.main

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "book_tracker.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
