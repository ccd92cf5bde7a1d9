"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (SQL, in-memory) live in the
infrastructure layer and in the test fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ims.domain.model.product import Product
from ims.domain.model.value_objects import Money


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product, oldest first where the store can tell."""

    @abstractmethod
    def add(self, product: Product) -> None:
        """Persist a new product."""

    @abstractmethod
    def update_price(self, product_id: str, price: Money) -> bool:
        """Store a new price, leaving the stock level alone.

        Returns False if no row matched.
        """

    @abstractmethod
    def adjust_quantity(self, product_id: str, delta: int) -> Product | None:
        """Atomically add ``delta`` to the stored quantity.

        The change is applied only if the product exists and the result
        stays within 0..MAX_QUANTITY. Returns the product as stored after
        the change, or None when nothing was updated.
        """

    @abstractmethod
    def delete(self, product_id: str) -> bool:
        """Remove a product. Returns False if no row matched."""
