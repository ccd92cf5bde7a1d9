"""Unit tests for the Product aggregate."""

from decimal import Decimal

import pytest

from ims.domain.exceptions import (
    InsufficientStockError,
    InvalidPriceError,
    InvalidProductError,
    InvalidQuantityError,
)
from ims.domain.model.product import MAX_QUANTITY, Product
from ims.domain.model.value_objects import Money


def _widget(quantity: int = 20) -> Product:
    return Product.create(name="Widget", price=9.99, quantity=quantity)


class TestProductCreate:

    def test_valid_product_gets_fresh_id(self):
        a = _widget()
        b = _widget()
        assert a.id and b.id
        assert a.id != b.id

    def test_fields_are_kept(self):
        p = Product.create(name="  Widget ", price="9.99", quantity=20)
        assert p.name == "Widget"
        assert p.price == Money(Decimal("9.99"))
        assert p.quantity == 20
        assert p.created_at == p.updated_at

    def test_zero_quantity_allowed(self):
        assert Product.create(name="Widget", price=1, quantity=0).quantity == 0

    @pytest.mark.parametrize("name", ["", "   "])
    def test_empty_name_rejected(self, name):
        with pytest.raises(InvalidProductError, match="name cannot be empty"):
            Product.create(name=name, price=9.99, quantity=1)

    @pytest.mark.parametrize("price", [0, -1, "abc", float("nan"), True])
    def test_non_positive_or_bad_price_rejected(self, price):
        with pytest.raises(InvalidProductError, match="price must be greater than zero"):
            Product.create(name="Widget", price=price, quantity=1)

    def test_negative_quantity_rejected(self):
        with pytest.raises(InvalidProductError, match="cannot be negative"):
            Product.create(name="Widget", price=9.99, quantity=-1)

    def test_fractional_quantity_rejected(self):
        with pytest.raises(InvalidProductError, match="whole number"):
            Product.create(name="Widget", price=9.99, quantity=1.5)

    def test_quantity_above_storage_limit_rejected(self):
        with pytest.raises(InvalidProductError, match="too large"):
            Product.create(name="Widget", price=9.99, quantity=MAX_QUANTITY + 1)

    def test_quantity_at_storage_limit_allowed(self):
        assert _widget(MAX_QUANTITY).quantity == MAX_QUANTITY


class TestProductSellUnits:

    def test_sell_reduces_quantity(self):
        p = _widget(20)
        p.sell_units(11)
        assert p.quantity == 9

    def test_sell_everything(self):
        p = _widget(5)
        p.sell_units(5)
        assert p.quantity == 0

    def test_sell_more_than_available_rejected(self):
        p = _widget(9)
        with pytest.raises(InsufficientStockError, match="Insufficient stock for Widget"):
            p.sell_units(15)
        assert p.quantity == 9

    @pytest.mark.parametrize("quantity", [0, -3])
    def test_sell_non_positive_rejected(self, quantity):
        p = _widget(20)
        with pytest.raises(InvalidQuantityError, match="greater than zero"):
            p.sell_units(quantity)
        assert p.quantity == 20


class TestProductRestock:

    def test_restock_increases_quantity(self):
        p = _widget(3)
        p.restock(7)
        assert p.quantity == 10

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_restock_non_positive_rejected(self, quantity):
        p = _widget(3)
        with pytest.raises(InvalidQuantityError):
            p.restock(quantity)
        assert p.quantity == 3

    @pytest.mark.parametrize("quantity", [2**63, MAX_QUANTITY - 2])
    def test_restock_past_storage_limit_rejected(self, quantity):
        p = _widget(3)
        with pytest.raises(InvalidQuantityError, match="maximum stock level"):
            p.restock(quantity)
        assert p.quantity == 3

    def test_restock_up_to_storage_limit(self):
        p = _widget(3)
        p.restock(MAX_QUANTITY - 3)
        assert p.quantity == MAX_QUANTITY

    def test_restock_touches_updated_at(self):
        p = _widget(3)
        before = p.updated_at
        p.restock(1)
        assert p.updated_at >= before


class TestProductUpdatePrice:

    def test_update_price(self):
        p = _widget()
        p.update_price(Money.of("12.50"))
        assert p.price == Money.of("12.50")

    def test_zero_price_rejected(self):
        p = _widget()
        with pytest.raises(InvalidPriceError, match="greater than zero"):
            p.update_price(Money.zero())
        assert p.price == Money.of("9.99")


class TestProductLowStock:

    def test_below_threshold_is_low(self):
        assert _widget(9).is_low_stock(10)

    def test_threshold_itself_is_not_low(self):
        assert not _widget(10).is_low_stock(10)

    def test_stock_value(self):
        assert _widget(3).stock_value == Money.of("29.97")
