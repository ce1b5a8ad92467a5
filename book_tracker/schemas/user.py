"""
User Pydantic Schemas
"""

from pydantic import BaseModel, ConfigDict


class UserResponse(BaseModel):
    """Public user data (never includes the password hash)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str
