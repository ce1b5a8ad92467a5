"""
View Schemas

Templating is not part of this application, so each page is returned as a
JSON view model: a `view` name plus the data a template would receive.
"""

from typing import Literal

from pydantic import BaseModel, Field

from book_tracker.schemas.book import BookResponse
from book_tracker.schemas.user import UserResponse


class IndexView(BaseModel):
    view: Literal["index"] = "index"


class LoginView(BaseModel):
    view: Literal["login"] = "login"
    messages: list[str] = Field(
        default_factory=list,
        description="Pending flash messages (shown once)",
    )


class RegisterView(BaseModel):
    view: Literal["register"] = "register"


class HomeView(BaseModel):
    view: Literal["home"] = "home"
    user: UserResponse
    books: list[BookResponse]


class AddNewView(BaseModel):
    view: Literal["addNew"] = "addNew"


class BookDetailView(BaseModel):
    view: Literal["bookDetail"] = "bookDetail"
    book: BookResponse
