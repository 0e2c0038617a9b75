"""
Shared base models.

``CamelModel`` maps snake_case attributes to the camelCase names used
by the console (``user_id`` <-> ``userId``).  ``PartialModel`` is the
base for update payloads: any field may be omitted, but a field that
is present must not be ``null``.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError


class CamelModel(BaseModel):
    # Unknown keys (including ``id`` and ``createdAt`` on input) are ignored.
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class PartialModel(CamelModel):
    """Base for partial updates.

    Only the keys present in the request are applied, so callers read
    the payload with ``model_dump(exclude_unset=True)``.
    """

    @field_validator("*", mode="before")
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        if value is None:
            raise PydanticCustomError("null_value", "Field may not be null")
        return value
