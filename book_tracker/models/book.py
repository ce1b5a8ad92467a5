"""
Book Model

A book on a user's private list. Books are never shared: every query that
touches this table is scoped by user_id.
"""

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from book_tracker.database import Base

if TYPE_CHECKING:
    from book_tracker.models.user import User


class Book(Base):
    """
    Table: book

    Relationships:
    - owner: Many-to-One with User (ON DELETE CASCADE)
    """

    __tablename__ = "book"

    id: Mapped[int] = mapped_column(primary_key=True)

    title: Mapped[str] = mapped_column(String(255), nullable=False)

    author: Mapped[str] = mapped_column(String(255), nullable=False)

    status: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        comment="Reading status, e.g. read, reading, to-read"
    )

    rate: Mapped[int | None] = mapped_column(
        Integer,
        nullable=True,
        comment="User's rating (0-5), null if unrated"
    )

    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )

    owner: Mapped["User"] = relationship("User", back_populates="books")

    def __repr__(self) -> str:
        return f"Book(id={self.id}, title='{self.title}', user_id={self.user_id})"
