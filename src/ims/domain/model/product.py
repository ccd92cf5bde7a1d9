"""Product aggregate.

A product is a stocked item: it has a price and an on-hand quantity that
moves with sales and restocks. The aggregate guards the two invariants
that every mutation must preserve: quantity never negative, price always
greater than zero.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from ims.domain.exceptions import (
    InsufficientStockError,
    InvalidPriceError,
    InvalidProductError,
    InvalidQuantityError,
    ValidationError,
)
from ims.domain.model.value_objects import Money, new_id

# Largest stock level a 64-bit INTEGER column can hold.
MAX_QUANTITY = 2**63 - 1


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Product:
    """A product in the inventory.

    This is an aggregate root. Kept as a mutable dataclass because
    selling, restocking and repricing are legitimate mutations; the
    service layer holds a transient copy while an operation runs and the
    repository owns the persisted row.
    """

    id: str
    name: str
    price: Money
    quantity: int
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    @classmethod
    def create(cls, name: str, price: str | float | int, quantity: int) -> Product:
        """Validate inputs and build a new product with a fresh identifier."""
        if not isinstance(name, str) or not name.strip():
            raise InvalidProductError("Product name cannot be empty")

        try:
            money = Money.of(price)
        except ValidationError as exc:
            raise InvalidProductError("Product price must be greater than zero") from exc
        if not money.is_positive:
            raise InvalidProductError("Product price must be greater than zero")

        if not isinstance(quantity, int) or isinstance(quantity, bool):
            raise InvalidProductError("Product quantity must be a whole number")
        if quantity < 0:
            raise InvalidProductError("Product quantity cannot be negative")
        if quantity > MAX_QUANTITY:
            raise InvalidProductError("Product quantity is too large")

        now = _utcnow()
        return cls(
            id=new_id(),
            name=name.strip(),
            price=money,
            quantity=quantity,
            created_at=now,
            updated_at=now,
        )

    def sell_units(self, quantity: int) -> None:
        """Take ``quantity`` units out of stock.

        Raises InsufficientStockError without touching the stock level
        when fewer units are on hand than requested.
        """
        _require_positive(quantity, "The quantity to be sold must be greater than zero")
        if quantity > self.quantity:
            raise InsufficientStockError(
                f"Insufficient stock for {self.name} "
                f"(requested {quantity}, have {self.quantity})"
            )
        self.quantity -= quantity
        self.updated_at = _utcnow()

    def restock(self, quantity: int) -> None:
        _require_positive(quantity, "Restock amount must be greater than zero")
        if quantity > MAX_QUANTITY - self.quantity:
            raise InvalidQuantityError("Restock would exceed the maximum stock level")
        self.quantity += quantity
        self.updated_at = _utcnow()

    def update_price(self, new_price: Money) -> None:
        if not new_price.is_positive:
            raise InvalidPriceError("Price must be greater than zero")
        self.price = new_price
        self.updated_at = _utcnow()

    def is_low_stock(self, threshold: int) -> bool:
        """True when stock has fallen strictly below ``threshold``."""
        return self.quantity < threshold

    @property
    def stock_value(self) -> Money:
        return self.price * self.quantity


def _require_positive(quantity: int, message: str) -> None:
    if not isinstance(quantity, int) or isinstance(quantity, bool) or quantity <= 0:
        raise InvalidQuantityError(message)
