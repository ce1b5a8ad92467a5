"""
Session Model

Server-side session records. The browser only holds an opaque random token
in a cookie; this table stores an HMAC of that token (never the token
itself), the logged-in user and a single pending flash message.

An anonymous session (user_id NULL) exists only to carry a flash message
across the redirect after a failed login.
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from book_tracker.database import Base


class UserSession(Base):
    """
    Table: sessions

    Named UserSession to avoid confusion with sqlalchemy.orm.Session.
    """

    __tablename__ = "sessions"

    id: Mapped[str] = mapped_column(
        String(64),
        primary_key=True,
        comment="HMAC-SHA256 of the session cookie token"
    )

    user_id: Mapped[int | None] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        index=True,
        nullable=True,
    )

    flash_message: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        comment="Single-use message shown on the next page view"
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    expires_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        index=True,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"UserSession(user_id={self.user_id}, expires_at={self.expires_at})"
