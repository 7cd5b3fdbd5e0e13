"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (Views) and the
Service layer.  DTOs are immutable (``frozen=True``).

- ``CreateProductDTO``: input for product creation.
- ``UpdateProductDTO``: input for full product replacement.
- ``ProductOutputDTO``: output with all product fields.

Validation is limited to presence and JSON type: a missing field, a
string price or a fractional quantity raises ``pydantic.ValidationError``
before any store access.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, field_validator

if TYPE_CHECKING:
    from modules.products.models import Product

# Column ranges: IntegerField is 32-bit, BigAutoField is 64-bit
INT32_MIN, INT32_MAX = -(2**31), 2**31 - 1
BIGINT_MAX = 2**63 - 1


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests.

    An ``id`` sent by the client is ignored; the store assigns it.
    """

    model_config = ConfigDict(frozen=True)

    name: StrictStr = Field(max_length=255)
    price: Decimal = Field(max_digits=10, decimal_places=2)
    quantity: StrictInt = Field(ge=INT32_MIN, le=INT32_MAX)

    @field_validator("price", mode="before")
    @classmethod
    def price_must_be_a_number(cls, v: Any) -> Any:
        # bool is an int subclass; "1.5" would otherwise be coerced
        if isinstance(v, bool) or not isinstance(v, (int, float, Decimal)):
            raise ValueError("Price must be a number.")
        if isinstance(v, float):
            return Decimal(str(v))
        return v


class UpdateProductDTO(CreateProductDTO):
    """Immutable DTO for product update requests.

    Updates replace the whole record, so every field is required,
    including the ``id`` that must match the route.
    """

    id: StrictInt = Field(ge=1, le=BIGINT_MAX)


# ---------------------------------------------------------------------------
# Output DTO
# ---------------------------------------------------------------------------


class ProductOutputDTO(BaseModel):
    """Immutable DTO for product API responses."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    price: Decimal
    quantity: int

    @classmethod
    def from_entity(cls, product: Product) -> ProductOutputDTO:
        """Build an output DTO from a Product model instance."""
        return cls(
            id=product.id,
            name=product.name,
            price=product.price,
            quantity=product.quantity,
        )
