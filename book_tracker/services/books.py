"""
Book Data Access

Every operation takes the requesting user's id and scopes its statement by
it, so one user can never read or change another user's books.

Owner-scoped mutations that match no row tell two cases apart:
- the id does not exist at all → no-op, returns False
- the id exists but belongs to someone else → NotFoundError
"""

import logging

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from book_tracker.database import storage_errors
from book_tracker.exceptions import NotFoundError
from book_tracker.models import Book
from book_tracker.schemas import BookForm

logger = logging.getLogger(__name__)


def list_books_by_user(db: Session, user_id: int) -> list[Book]:
    stmt = select(Book).where(Book.user_id == user_id).order_by(Book.id)
    with storage_errors(db, "list books"):
        return list(db.execute(stmt).scalars().all())


def find_book_by_id(db: Session, user_id: int, book_id: int) -> Book | None:
    stmt = select(Book).where(Book.id == book_id, Book.user_id == user_id)
    with storage_errors(db, "find book"):
        return db.execute(stmt).scalar_one_or_none()


def insert_book(db: Session, user_id: int, data: BookForm) -> Book:
    book = Book(**data.model_dump(), user_id=user_id)

    with storage_errors(db, "insert book"):
        db.add(book)
        db.commit()
        db.refresh(book)

    logger.info(f"Book {book.id} added by user {user_id}")
    return book


def update_book(db: Session, user_id: int, book_id: int, data: BookForm) -> bool:
    """
    Overwrite a book's fields.

    Returns:
        True if the book was updated, False if no book has this id

    Raises:
        NotFoundError: If the book belongs to another user
        QueryError: On any storage failure
    """
    stmt = (
        update(Book)
        .where(Book.id == book_id, Book.user_id == user_id)
        .values(**data.model_dump())
    )
    with storage_errors(db, "update book"):
        result = db.execute(stmt)
        db.commit()
        if result.rowcount == 0:
            _raise_if_owned_elsewhere(db, user_id, book_id)
            return False

    logger.info(f"Book {book_id} updated by user {user_id}")
    return True


def delete_book(db: Session, user_id: int, book_id: int) -> bool:
    """
    Delete a book.

    Returns:
        True if the book was deleted, False if no book has this id

    Raises:
        NotFoundError: If the book belongs to another user
        QueryError: On any storage failure
    """
    stmt = delete(Book).where(Book.id == book_id, Book.user_id == user_id)
    with storage_errors(db, "delete book"):
        result = db.execute(stmt)
        db.commit()
        if result.rowcount == 0:
            _raise_if_owned_elsewhere(db, user_id, book_id)
            return False

    logger.info(f"Book {book_id} deleted by user {user_id}")
    return True


def _raise_if_owned_elsewhere(db: Session, user_id: int, book_id: int) -> None:
    stmt = select(Book.id).where(Book.id == book_id)
    if db.execute(stmt).first() is not None:
        logger.warning(f"User {user_id} tried to modify book {book_id} owned by another user")
        raise NotFoundError()
