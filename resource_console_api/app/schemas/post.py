"""Pydantic models for posts."""

from datetime import datetime
from typing import Optional

from pydantic import Field, StrictInt

from .base import CamelModel, PartialModel


class PostBase(CamelModel):
    title: str = Field(..., examples=["First Post"])
    body: str = Field(..., examples=["This is the content of the first post."])
    # Plain reference; the user is not required to exist.
    user_id: StrictInt = Field(..., examples=[1])


class PostCreate(PostBase):
    """Schema for creating a post."""
    pass


class PostUpdate(PartialModel):
    title: Optional[str] = None
    body: Optional[str] = None
    user_id: Optional[StrictInt] = None


class PostRead(PostBase):
    id: int
    created_at: datetime
