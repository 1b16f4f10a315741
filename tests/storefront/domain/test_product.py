"""Tests for the Product record and its capabilities."""

from datetime import UTC, datetime, timedelta
from decimal import Decimal

import pytest
from pydantic import ValidationError

from storefront.catalogue.product import Capability, Perishable, Product, Shippable
from storefront.exceptions import InsufficientStockError, InvalidQuantityError, NotPerishableError

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=UTC)


class TestProductConstruction:
    def test_plain_product_has_no_capabilities(self):
        card = Product(name="Mobile scratch card", unit_price=50, stock_quantity=100)
        assert card.capabilities() == frozenset()
        assert card.requires_shipping() is False
        assert card.is_perishable() is False
        assert card.weight_kg is None

    def test_create_attaches_shippable(self):
        tv = Product.create("TV", 1000, 3, weight_kg=15.0)
        assert tv.shippable == Shippable(weight_kg=15.0)
        assert tv.capabilities() == frozenset({Capability.SHIPPABLE})
        assert tv.requires_shipping() is True

    def test_create_attaches_both_capabilities(self):
        cheese = Product.create("Cheese", 100, 10, weight_kg=0.4, expires_at=NOW + timedelta(days=7))
        assert cheese.capabilities() == frozenset({Capability.SHIPPABLE, Capability.PERISHABLE})
        assert cheese.weight_kg == 0.4

    def test_perishable_without_shipping(self):
        voucher = Product.create("Meal voucher", 20, 5, expires_at=NOW + timedelta(days=1))
        assert voucher.requires_shipping() is False
        assert voucher.is_perishable() is True

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"name": "", "unit_price": 1, "stock_quantity": 1},
            {"name": "TV", "unit_price": -1, "stock_quantity": 1},
            {"name": "TV", "unit_price": 1, "stock_quantity": -1},
        ],
    )
    def test_invalid_fields_rejected(self, kwargs):
        with pytest.raises(ValidationError):
            Product(**kwargs)

    def test_weight_must_be_positive(self):
        with pytest.raises(ValidationError):
            Shippable(weight_kg=0)

    def test_identity_fields_are_frozen(self):
        tv = Product.create("TV", 1000, 3, weight_kg=15.0)
        with pytest.raises(ValidationError):
            tv.unit_price = 1
        with pytest.raises(ValidationError):
            tv.name = "Radio"
        with pytest.raises(ValidationError):
            tv.shippable = None

    @pytest.mark.parametrize("quantity", [10, -1])
    def test_stock_cannot_be_assigned(self, quantity):
        tv = Product.create("TV", 1000, 3, weight_kg=15.0)
        with pytest.raises(ValidationError):
            tv.stock_quantity = quantity
        assert tv.stock_quantity == 3

    def test_unit_price_is_decimal(self):
        gum = Product.create("Gum", 0.1, 10)
        assert gum.unit_price == Decimal("0.1")


class TestProductIdentity:
    def test_equal_only_to_itself(self):
        first = Product.create("TV", 1000, 3, weight_kg=15.0)
        second = Product.create("TV", 1000, 3, weight_kg=15.0)
        assert first == first
        assert first != second

    def test_hashable_while_stock_changes(self):
        tv = Product.create("TV", 1000, 3, weight_kg=15.0)
        reserved = {tv: 1}
        tv.decrease_stock(1)
        assert reserved[tv] == 1


class TestExpiry:
    def test_not_expired_before_expiry(self):
        cheese = Product.create("Cheese", 100, 10, expires_at=NOW + timedelta(days=7))
        assert cheese.is_expired(NOW) is False

    def test_expired_after_expiry(self):
        cheese = Product.create("Cheese", 100, 10, expires_at=NOW - timedelta(seconds=1))
        assert cheese.is_expired(NOW) is True

    def test_exact_expiry_instant_is_not_expired(self):
        cheese = Product.create("Cheese", 100, 10, expires_at=NOW)
        assert cheese.is_expired(NOW) is False

    def test_naive_datetimes_are_treated_as_utc(self):
        perishable = Perishable(expires_at=datetime(2024, 6, 1, 12, 0))
        assert perishable.expires_at.tzinfo is UTC
        assert perishable.is_expired(datetime(2024, 6, 1, 12, 0, 1)) is True

    def test_non_perishable_product_cannot_be_asked(self):
        tv = Product.create("TV", 1000, 3, weight_kg=15.0)
        with pytest.raises(NotPerishableError):
            tv.is_expired(NOW)


class TestDecreaseStock:
    def test_decrease_subtracts_exactly(self):
        tv = Product.create("TV", 1000, 3)
        tv.decrease_stock(2)
        assert tv.stock_quantity == 1

    def test_decrease_to_zero(self):
        tv = Product.create("TV", 1000, 3)
        tv.decrease_stock(3)
        assert tv.stock_quantity == 0

    def test_decrease_beyond_stock_fails_without_change(self):
        tv = Product.create("TV", 1000, 3)
        with pytest.raises(InsufficientStockError) as exc_info:
            tv.decrease_stock(4)
        assert tv.stock_quantity == 3
        assert exc_info.value.requested == 4
        assert exc_info.value.available == 3
        assert exc_info.value.product_name == "TV"

    def test_negative_decrease_rejected(self):
        tv = Product.create("TV", 1000, 3)
        with pytest.raises(InvalidQuantityError):
            tv.decrease_stock(-1)
        assert tv.stock_quantity == 3
