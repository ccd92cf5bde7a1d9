"""In-memory fakes for testing.

These implement the same abstract interfaces as the SQL repositories and
infrastructure adapters but keep everything in plain Python objects. No
database, no signing keys, no side effects.
"""

from __future__ import annotations

from dataclasses import replace

from ims.domain.exceptions import TokenGenerationError, UnauthorizedError
from ims.domain.model.manager import Manager
from ims.domain.model.product import MAX_QUANTITY, Product
from ims.domain.model.value_objects import Money
from ims.domain.ports.notifier import Notifier
from ims.domain.ports.token_generator import TokenGenerator
from ims.domain.repository.manager_repository import ManagerRepository
from ims.domain.repository.product_repository import ProductRepository


class FakeProductRepository(ProductRepository):
    """Stores copies so that, like a real database, callers cannot mutate
    persisted state without going through the repository."""

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        for p in products or []:
            self._store[p.id] = replace(p)

    def get_by_id(self, product_id: str) -> Product | None:
        product = self._store.get(product_id)
        return replace(product) if product is not None else None

    def list_all(self) -> list[Product]:
        return [replace(p) for p in self._store.values()]

    def add(self, product: Product) -> None:
        self._store[product.id] = replace(product)

    def update_price(self, product_id: str, price: Money) -> bool:
        product = self._store.get(product_id)
        if product is None:
            return False
        product.price = price
        return True

    def adjust_quantity(self, product_id: str, delta: int) -> Product | None:
        product = self._store.get(product_id)
        if product is None or not 0 <= product.quantity + delta <= MAX_QUANTITY:
            return None
        product.quantity += delta
        return replace(product)

    def delete(self, product_id: str) -> bool:
        return self._store.pop(product_id, None) is not None


class FakeManagerRepository(ManagerRepository):

    def __init__(self, managers: list[Manager] | None = None) -> None:
        self._store: dict[str, Manager] = {}
        for m in managers or []:
            self._store[m.email] = m

    def get_by_email(self, email: str) -> Manager | None:
        return self._store.get(email)

    def add(self, manager: Manager) -> None:
        self._store[manager.email] = manager

    def count(self) -> int:
        return len(self._store)


class RecordingNotifier(Notifier):

    def __init__(self) -> None:
        self.notified: list[Product] = []

    def notify_low_stock(self, product: Product) -> None:
        self.notified.append(product)


class FailingNotifier(Notifier):

    def notify_low_stock(self, product: Product) -> None:
        raise RuntimeError("notification channel is down")


class FakeTokenGenerator(TokenGenerator):
    """Issues ``token-for-<manager id>`` and accepts only tokens it issued."""

    def __init__(self, fail: bool = False) -> None:
        self._fail = fail
        self.issued: dict[str, str] = {}

    def generate_token(self, manager: Manager) -> str:
        if self._fail:
            raise TokenGenerationError("something went wrong while generating token")
        token = f"token-for-{manager.id}"
        self.issued[token] = manager.id
        return token

    def verify_token(self, token: str) -> str:
        if token not in self.issued:
            raise UnauthorizedError("unauthorized")
        return self.issued[token]
