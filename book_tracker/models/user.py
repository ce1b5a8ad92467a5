"""
User Model

Represents a registered account. Users are created on registration and read
on login and session resolution; they are never updated or deleted by the
application.
"""

from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from book_tracker.database import Base

if TYPE_CHECKING:
    from book_tracker.models.book import Book


class User(Base):
    """
    Table: users

    The bcrypt hash lives in the `password` column; the attribute is named
    hashed_password so plain text is never mistaken for it in code.

    Indexes:
    - Primary key on id (automatic)
    - email: Unique index for login lookups
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True)

    username: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        comment="Display name chosen at registration"
    )

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        index=True,
        nullable=False,
        comment="User's email address (used for login)"
    )

    hashed_password: Mapped[str] = mapped_column(
        "password",
        String(255),
        nullable=False,
        comment="Bcrypt hashed password"
    )

    books: Mapped[list["Book"]] = relationship(
        "Book",
        back_populates="owner",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"User(id={self.id}, email='{self.email}', username='{self.username}')"
