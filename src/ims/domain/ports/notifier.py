"""Outbound port for low-stock alerts."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ims.domain.model.product import Product


class Notifier(ABC):

    @abstractmethod
    def notify_low_stock(self, product: Product) -> None:
        """Tell someone that ``product`` is running low. Fire-and-forget."""
