"""SQL-backed implementation of ProductRepository."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import Engine, Row, delete, insert, select, update

from ims.domain.model.product import MAX_QUANTITY, Product
from ims.domain.model.value_objects import Money
from ims.domain.repository.product_repository import ProductRepository
from ims.infrastructure.persistence.database import products, translate_errors


class SqlProductRepository(ProductRepository):

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        with translate_errors("get_product"), self._engine.connect() as conn:
            row = conn.execute(
                select(products).where(products.c.id == product_id)
            ).one_or_none()
        return self._to_domain(row) if row is not None else None

    def list_all(self) -> list[Product]:
        query = select(products).order_by(products.c.created_at, products.c.id)
        with translate_errors("list_products"), self._engine.connect() as conn:
            rows = conn.execute(query).all()
        return [self._to_domain(row) for row in rows]

    def add(self, product: Product) -> None:
        with translate_errors("add_product"), self._engine.begin() as conn:
            conn.execute(insert(products).values(**self._to_row(product)))

    def update_price(self, product_id: str, price: Money) -> bool:
        statement = (
            update(products)
            .where(products.c.id == product_id)
            .values(price=float(price), updated_at=datetime.now(timezone.utc))
        )
        with translate_errors("update_price"), self._engine.begin() as conn:
            result = conn.execute(statement)
        return result.rowcount > 0

    def adjust_quantity(self, product_id: str, delta: int) -> Product | None:
        if abs(delta) > MAX_QUANTITY:
            return None
        # One guarded statement: the database decides atomically whether
        # the stock can absorb the change. The bound is written so that
        # the comparison itself never overflows.
        if delta >= 0:
            guard = products.c.quantity <= MAX_QUANTITY - delta
        else:
            guard = products.c.quantity >= -delta
        statement = (
            update(products)
            .where(products.c.id == product_id)
            .where(guard)
            .values(
                quantity=products.c.quantity + delta,
                updated_at=datetime.now(timezone.utc),
            )
        )
        with translate_errors("adjust_quantity"), self._engine.begin() as conn:
            result = conn.execute(statement)
            if result.rowcount == 0:
                return None
            row = conn.execute(
                select(products).where(products.c.id == product_id)
            ).one()
        return self._to_domain(row)

    def delete(self, product_id: str) -> bool:
        with translate_errors("delete_product"), self._engine.begin() as conn:
            result = conn.execute(delete(products).where(products.c.id == product_id))
        return result.rowcount > 0

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_row(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "price": float(product.price),
            "quantity": product.quantity,
            "created_at": product.created_at,
            "updated_at": product.updated_at,
        }

    @staticmethod
    def _to_domain(row: Row) -> Product:
        return Product(
            id=row.id,
            name=row.name,
            price=Money.of(row.price),
            quantity=row.quantity,
            created_at=_as_utc(row.created_at),
            updated_at=_as_utc(row.updated_at),
        )


def _as_utc(value: datetime | None) -> datetime:
    # SQLite drops tzinfo on the way back; every stored timestamp is UTC.
    if value is None:
        return datetime.now(timezone.utc)
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
