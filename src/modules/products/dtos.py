"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer and the Service layer.
DTOs are immutable (``frozen=True``) and bind the wire names
(``Name``, ``Price``, ``Description``) through aliases.

- ``ProductInputDTO``: full record for creation and replacement (POST/PUT).
- ``PriceUpdateDTO``: the only field a PATCH applies.

Neither DTO carries ``Id``: the store assigns it on creation and the
path supplies it everywhere else.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator

from modules.products.models import (
    NAME_MAX_LENGTH,
    PRICE_DECIMAL_PLACES,
    PRICE_MAX_SIGNIFICANT_DIGITS,
)


class ProductInputDTO(BaseModel):
    """Immutable DTO for POST and PUT bodies.

    Validates:
    - ``Name`` is a non-blank string of at most 100 characters.
    - ``Price`` is a finite decimal of at most 15 digits, 2 of them fractional.
    - ``Description`` is a string or null.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(alias="Name", max_length=NAME_MAX_LENGTH)
    price: Decimal = Field(
        alias="Price",
        max_digits=PRICE_MAX_SIGNIFICANT_DIGITS,
        decimal_places=PRICE_DECIMAL_PLACES,
    )
    description: str | None = Field(default=None, alias="Description")

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("The Name field is required.")
        return v

    def to_fields(self) -> Dict[str, Any]:
        """Model field names mapped to values, as the store expects them."""
        return self.model_dump(by_alias=False)


class PriceUpdateDTO(BaseModel):
    """Immutable DTO for PATCH bodies; any other field is ignored."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    price: Decimal = Field(
        alias="Price",
        max_digits=PRICE_MAX_SIGNIFICANT_DIGITS,
        decimal_places=PRICE_DECIMAL_PLACES,
    )

    def to_fields(self) -> Dict[str, Any]:
        return {"price": self.price}
