"""
Pydantic models for user data.

Only the username and identifier are ever returned for a user; the
exercise entries are exposed through the log endpoint.
"""

from typing import List

from pydantic import BaseModel, Field

from .exercise import Entry


class UserCreate(BaseModel):
    """Payload for registering a user."""

    username: str = Field(..., min_length=1, examples=["fcc_test"])


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    username: str
    id: str = Field(..., examples=["65a1f0c2e4b0a1b2c3d4e5f6"])


class User(UserRead):
    """A stored user with the full, insertion-ordered list of entries."""

    exercises: List[Entry] = Field(default_factory=list)
