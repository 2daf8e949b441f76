"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the typed contracts between the API layer and the Service
layer.  DTOs are immutable (``frozen=True``).

Views build them with ``from_payload`` *after* the validation pipeline
has accepted the raw request body, so the conversions below never see
an unchecked value.  The field validators restate the model invariants.

- ``CreateProductDTO``: input for product creation.
- ``UpdateProductDTO``: input for full product replacement.
"""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, field_validator

from modules.products.validation import as_text, to_bool, to_number


class _ProductFieldsMixin(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    price: float

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("Product name must not be empty.")
        return v

    @field_validator("price")
    @classmethod
    def price_must_be_positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("Price must be greater than zero.")
        return v


class CreateProductDTO(_ProductFieldsMixin):
    """Immutable DTO for product creation requests.

    ``availability`` is not accepted from the client; new products are
    always available.
    """

    availability: bool = True

    @classmethod
    def from_payload(cls, body: Mapping[str, Any]) -> CreateProductDTO:
        return cls(
            name=as_text(body.get("name")),
            price=to_number(body.get("price")),
        )


class UpdateProductDTO(_ProductFieldsMixin):
    """Immutable DTO for full product replacement (PUT).

    Every field is required and overwrites the stored value.
    """

    availability: bool

    @classmethod
    def from_payload(cls, body: Mapping[str, Any]) -> UpdateProductDTO:
        return cls(
            name=as_text(body.get("name")),
            price=to_number(body.get("price")),
            availability=to_bool(body.get("availability")),
        )
