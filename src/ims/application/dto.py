"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data from the application layer to the HTTP and CLI layers
without exposing domain internals (Money, datetimes) to the outside world.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass

from ims.domain.model.product import Product


@dataclass(frozen=True)
class ProductDTO:
    """Output: a product as rendered in JSON responses."""

    id: str
    name: str
    price: float
    quantity: int
    created_at: str
    updated_at: str

    @classmethod
    def from_product(cls, product: Product) -> ProductDTO:
        return cls(
            id=product.id,
            name=product.name,
            price=float(product.price),
            quantity=product.quantity,
            created_at=product.created_at.isoformat(),
            updated_at=product.updated_at.isoformat(),
        )

    def to_dict(self) -> dict:
        return asdict(self)
