"""
Book Pydantic Schemas

BookForm validates what the add and edit forms submit. HTML forms send every
field as a string, so blank optional fields arrive as "" and are converted to
None before type validation.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

RATE_MIN = 0
RATE_MAX = 5


class BookForm(BaseModel):
    """
    Book fields submitted by the user.

    title, author and status are required and must not be blank; a
    pydantic.ValidationError here means the form is sent back without
    persisting anything.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(..., min_length=1, max_length=255)
    author: str = Field(..., min_length=1, max_length=255)
    status: str = Field(
        ...,
        min_length=1,
        max_length=50,
        examples=["read", "reading", "to-read"],
    )
    rate: int | None = Field(
        default=None,
        ge=RATE_MIN,
        le=RATE_MAX,
        description=f"Rating from {RATE_MIN} to {RATE_MAX}",
    )
    notes: str | None = Field(default=None)

    @field_validator("rate", "notes", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


class BookResponse(BaseModel):
    """A stored book, as rendered in the home and detail views."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    author: str
    status: str
    rate: int | None = None
    notes: str | None = None
    user_id: int
