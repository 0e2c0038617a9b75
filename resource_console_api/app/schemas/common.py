"""Response bodies shared by every resource router."""

from typing import Any, Dict, List, Union

from pydantic import BaseModel


class Message(BaseModel):
    message: str


class FieldError(BaseModel):
    """One entry of a validation error response."""

    path: List[Union[str, int]]
    message: str
    code: str


class ValidationErrorBody(BaseModel):
    message: str = "Validation error"
    errors: List[FieldError]


class ResourceInfo(BaseModel):
    type: str
    label: str
    icon: str


class Health(BaseModel):
    status: str
    version: str


SearchResults = List[Dict[str, Any]]
