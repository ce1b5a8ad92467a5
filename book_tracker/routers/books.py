"""
Books Router

The logged-in user's private book list:
- GET  /home          list books
- GET  /addNew        creation form
- GET  /detail/{id}   one book
- POST /add           create
- POST /edit          update
- POST /delete        delete

Every route depends on CurrentUser, so anonymous visitors are redirected to
the landing page, and every query is scoped by the user's id. Invalid forms
redirect without persisting anything; storage failures become a 500 with a
route-specific message.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Form, status
from fastapi.responses import RedirectResponse
from pydantic import ValidationError

from book_tracker.dependencies import CurrentUser, DbSession
from book_tracker.exceptions import NotFoundError, QueryError
from book_tracker.schemas import (
    AddNewView,
    BookDetailView,
    BookForm,
    BookResponse,
    HomeView,
    UserResponse,
)
from book_tracker.services.books import (
    delete_book,
    find_book_by_id,
    insert_book,
    list_books_by_user,
    update_book,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Books"],
    responses={
        302: {"description": "Redirect (also sent when not logged in)"},
        404: {"description": "Book not found"},
        500: {"description": "Database error"},
    },
)


# =============================================================================
# Helper Functions
# =============================================================================
def _redirect(url: str) -> RedirectResponse:
    return RedirectResponse(url, status_code=status.HTTP_302_FOUND)


def parse_book_form(
    title: str,
    author: str,
    book_status: str,
    rate: str,
    notes: str,
) -> BookForm | None:
    """
    Validate submitted book fields.

    Returns:
        BookForm, or None if a required field is blank or rate is invalid
    """
    try:
        return BookForm(
            title=title,
            author=author,
            status=book_status,
            rate=rate,
            notes=notes,
        )
    except ValidationError as e:
        fields = ", ".join(str(err["loc"][0]) for err in e.errors())
        logger.info(f"Complete the fields: invalid {fields}")
        return None


# =============================================================================
# Views
# =============================================================================
@router.get(
    "/home",
    response_model=HomeView,
    summary="List my books",
)
def home(db: DbSession, user: CurrentUser) -> HomeView:
    try:
        books = list_books_by_user(db, user.id)
    except QueryError as e:
        raise QueryError("An error occurred while fetching books.") from e

    return HomeView(
        user=UserResponse.model_validate(user),
        books=[BookResponse.model_validate(book) for book in books],
    )


@router.get(
    "/addNew",
    response_model=AddNewView,
    summary="New book form",
)
def add_new(user: CurrentUser) -> AddNewView:
    return AddNewView()


@router.get(
    "/detail/{book_id}",
    response_model=BookDetailView,
    summary="Book detail",
)
def detail(book_id: int, db: DbSession, user: CurrentUser) -> BookDetailView:
    """
    Show one of the user's books.

    A book that does not exist and a book owned by someone else both
    answer 404.
    """
    try:
        book = find_book_by_id(db, user.id, book_id)
    except QueryError as e:
        raise QueryError("Server Error") from e

    if book is None:
        raise NotFoundError()

    return BookDetailView(book=BookResponse.model_validate(book))


# =============================================================================
# Mutations
# =============================================================================
@router.post(
    "/add",
    summary="Add a book",
    status_code=status.HTTP_302_FOUND,
)
def add(
    db: DbSession,
    user: CurrentUser,
    title: Annotated[str, Form()] = "",
    author: Annotated[str, Form()] = "",
    book_status: Annotated[str, Form(alias="status")] = "",
    rate: Annotated[str, Form()] = "",
    notes: Annotated[str, Form()] = "",
) -> RedirectResponse:
    """Create a book and return to the creation form."""
    data = parse_book_form(title, author, book_status, rate, notes)
    if data is None:
        return _redirect("/addNew")

    try:
        insert_book(db, user.id, data)
    except QueryError as e:
        raise QueryError("An error occurred while adding the book.") from e

    return _redirect("/addNew")


@router.post(
    "/edit",
    summary="Edit a book",
    status_code=status.HTTP_302_FOUND,
)
def edit(
    db: DbSession,
    user: CurrentUser,
    book_id: Annotated[int, Form(alias="updatedBookId")],
    title: Annotated[str, Form()] = "",
    author: Annotated[str, Form()] = "",
    book_status: Annotated[str, Form(alias="status")] = "",
    rate: Annotated[str, Form()] = "",
    notes: Annotated[str, Form()] = "",
) -> RedirectResponse:
    """
    Overwrite one of the user's books.

    Editing a book owned by someone else answers 404 and changes nothing.
    """
    data = parse_book_form(title, author, book_status, rate, notes)
    if data is None:
        return _redirect("/home")

    try:
        update_book(db, user.id, book_id, data)
    except QueryError as e:
        raise QueryError("An error occurred while editing the book.") from e

    return _redirect("/home")


@router.post(
    "/delete",
    summary="Delete a book",
    status_code=status.HTTP_302_FOUND,
)
def delete(
    db: DbSession,
    user: CurrentUser,
    book_id: Annotated[int, Form(alias="deletedBookId")],
) -> RedirectResponse:
    """
    Delete one of the user's books.

    An id that matches no book is a no-op; a book owned by someone else
    answers 404.
    """
    try:
        delete_book(db, user.id, book_id)
    except QueryError as e:
        raise QueryError("An error occurred while deleting the book.") from e

    return _redirect("/home")
