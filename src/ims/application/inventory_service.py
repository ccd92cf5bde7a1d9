"""Application service: product lifecycle and valuation use cases.

Each public method loads what it needs from the repository, lets the
Product aggregate enforce the business rules, and persists the result.
Errors raised by the aggregate or the repository propagate unchanged;
they are already expressed as domain exceptions.
"""

from __future__ import annotations

import structlog

from ims.domain.exceptions import (
    InsufficientStockError,
    InvalidPriceError,
    InvalidQuantityError,
    ProductNotFoundError,
    ValidationError,
)
from ims.domain.model.product import Product
from ims.domain.model.value_objects import Money
from ims.domain.ports.notifier import Notifier
from ims.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)

DEFAULT_LOW_STOCK_THRESHOLD = 10


class InventoryService:

    def __init__(
        self,
        product_repo: ProductRepository,
        notifier: Notifier,
        low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
    ) -> None:
        self._product_repo = product_repo
        self._notifier = notifier
        self._low_stock_threshold = low_stock_threshold

    # --- Commands -------------------------------------------------------------

    def add_product(self, name: str, price: str | float | int, quantity: int) -> Product:
        product = Product.create(name=name, price=price, quantity=quantity)
        self._product_repo.add(product)
        logger.info("product_added", product_id=product.id, name=product.name)
        return product

    def sell_product_units(self, product_id: str, quantity: int) -> Product:
        """Sell units of a product, alerting when stock runs low.

        The aggregate validates the sale against the loaded snapshot; the
        repository then applies it with a guarded update so that two
        concurrent sales can never take stock below zero.
        """
        product = self.get_product(product_id)
        product.sell_units(quantity)

        updated = self._product_repo.adjust_quantity(product_id, -quantity)
        if updated is None:
            raise self._failed_sale_error(product_id, quantity)

        logger.info(
            "product_units_sold",
            product_id=product_id,
            sold=quantity,
            remaining=updated.quantity,
        )
        if updated.is_low_stock(self._low_stock_threshold):
            self._notify_low_stock(updated)
        return updated

    def restock_product(self, product_id: str, quantity: int) -> Product:
        product = self.get_product(product_id)
        product.restock(quantity)

        updated = self._product_repo.adjust_quantity(product_id, quantity)
        if updated is None:
            raise self._failed_restock_error(product_id)

        logger.info(
            "product_restocked",
            product_id=product_id,
            added=quantity,
            quantity=updated.quantity,
        )
        return updated

    def update_product_price(self, product_id: str, new_price: str | float | int) -> None:
        product = self.get_product(product_id)
        product.update_price(_coerce_price(new_price))

        # Only the price is written; stock moves solely through adjust_quantity.
        if not self._product_repo.update_price(product_id, product.price):
            raise ProductNotFoundError(f"Product with ID '{product_id}' not found")
        logger.info("product_price_updated", product_id=product_id, price=str(product.price))

    def delete_product(self, product_id: str) -> None:
        if not self._product_repo.delete(product_id):
            raise ProductNotFoundError(f"Product with ID '{product_id}' not found")
        logger.info("product_deleted", product_id=product_id)

    # --- Queries --------------------------------------------------------------

    def get_product(self, product_id: str) -> Product:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(f"Product with ID '{product_id}' not found")
        return product

    def get_all_products(self) -> list[Product]:
        return self._product_repo.list_all()

    def get_inventory_value(self) -> Money:
        """Sum of price x quantity over every stored product."""
        total = Money.zero()
        for product in self._product_repo.list_all():
            total = total + product.stock_value
        return total

    # --- Internal helpers -----------------------------------------------------

    def _failed_sale_error(self, product_id: str, quantity: int) -> Exception:
        # The guarded update matched nothing: either the row vanished or a
        # concurrent sale consumed the stock after we loaded it.
        current = self._product_repo.get_by_id(product_id)
        if current is None:
            return ProductNotFoundError(f"Product with ID '{product_id}' not found")
        return InsufficientStockError(
            f"Insufficient stock for {current.name} "
            f"(requested {quantity}, have {current.quantity})"
        )

    def _failed_restock_error(self, product_id: str) -> Exception:
        if self._product_repo.get_by_id(product_id) is None:
            return ProductNotFoundError(f"Product with ID '{product_id}' not found")
        return InvalidQuantityError("Restock would exceed the maximum stock level")

    def _notify_low_stock(self, product: Product) -> None:
        try:
            self._notifier.notify_low_stock(product)
        except Exception:
            logger.exception("low_stock_notification_failed", product_id=product.id)


def _coerce_price(value: str | float | int) -> Money:
    try:
        return Money.of(value)
    except ValidationError as exc:
        raise InvalidPriceError("Price must be greater than zero") from exc
