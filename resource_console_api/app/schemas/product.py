"""
Pydantic models for products.

Price arrives either as a number (programmatic clients) or as a
numeric string (form text fields).  The input models accept both and
normalise the value to a positive float during validation, so the
stored ``ProductRead.price`` is always a float and no other layer
ever converts it again.
"""

import math
from datetime import datetime
from typing import Annotated, Optional, Union

from pydantic import AfterValidator, Field, StrictFloat, StrictInt, StrictStr
from pydantic_core import PydanticCustomError

from .base import CamelModel, PartialModel


def normalise_price(value: Union[float, str]) -> float:
    """Convert a price input to a float and check it is positive.

    Raises ``PydanticCustomError`` so the message reaches the client
    unchanged inside the validation error list.
    """
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            raise PydanticCustomError("price_type", "Price must be a number")
    if not math.isfinite(value) or value <= 0:
        raise PydanticCustomError("price_positive", "Price must be a positive number")
    return float(value)


# String or number on input (never a bool), always a float after validation.
PriceInput = Annotated[Union[StrictFloat, StrictInt, StrictStr], AfterValidator(normalise_price)]


class ProductCreate(CamelModel):
    """Schema for creating a product."""

    name: str = Field(..., examples=["Smartphone"])
    price: PriceInput = Field(..., examples=["699.99"])
    description: str = Field(..., examples=["Latest model with high-resolution camera"])
    category: str = Field(..., max_length=50, examples=["electronics"])


class ProductUpdate(PartialModel):
    name: Optional[str] = None
    price: Optional[PriceInput] = None
    description: Optional[str] = None
    category: Optional[str] = Field(None, max_length=50)


class ProductRead(CamelModel):
    id: int
    name: str
    price: float
    description: str
    category: str
    created_at: datetime
