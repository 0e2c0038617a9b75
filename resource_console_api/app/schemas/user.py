"""
Pydantic models for user records.

The password is stored and returned as submitted; hiding it is the
job of whatever renders the record (see ``client.displayable``).
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import CamelModel, PartialModel


class UserBase(CamelModel):
    name: str = Field(..., examples=["John Doe"])
    email: str = Field(..., examples=["john@example.com"])
    username: str = Field(..., examples=["johndoe"])
    password: str = Field(..., examples=["password123"])


class UserCreate(UserBase):
    """Schema for creating a user."""
    pass


class UserUpdate(PartialModel):
    """Schema for updating a user.

    All fields are optional; only provided fields will be updated.
    """

    name: Optional[str] = None
    email: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None


class UserRead(UserBase):
    """Schema for reading a user from the API."""

    id: int
    created_at: datetime
