"""Notifier that writes low-stock alerts to the application log."""

from __future__ import annotations

import structlog

from ims.domain.model.product import Product
from ims.domain.ports.notifier import Notifier

logger = structlog.get_logger(__name__)


class LogNotifier(Notifier):

    def notify_low_stock(self, product: Product) -> None:
        logger.warning(
            "low_stock_alert",
            product_id=product.id,
            product_name=product.name,
            available_quantity=product.quantity,
            hint="Please restock soon to avoid running out of stock.",
        )
