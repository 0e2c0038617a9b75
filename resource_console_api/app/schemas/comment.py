"""Pydantic models for comments."""

from datetime import datetime
from typing import Optional

from pydantic import Field, StrictInt

from .base import CamelModel, PartialModel


class CommentBase(CamelModel):
    name: str = Field(..., examples=["Alice Johnson"])
    email: str = Field(..., examples=["alice@example.com"])
    body: str = Field(..., examples=["Great post!"])
    # Plain reference; the post is not required to exist.
    post_id: StrictInt = Field(..., examples=[1])


class CommentCreate(CommentBase):
    """Schema for creating a comment."""
    pass


class CommentUpdate(PartialModel):
    name: Optional[str] = None
    email: Optional[str] = None
    body: Optional[str] = None
    post_id: Optional[StrictInt] = None


class CommentRead(CommentBase):
    id: int
    created_at: datetime
