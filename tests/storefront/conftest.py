from datetime import UTC, datetime, timedelta

import pytest

from storefront.cart.cart import ShoppingCart
from storefront.catalogue.product import Product
from storefront.checkout.engine import CheckoutEngine
from storefront.clock.fake_adapter import FixedClock
from storefront.config import CheckoutSettings
from storefront.customer.customer import Customer
from storefront.receipts.fake_adapter import FakeReceiptPresenter
from storefront.shipping.fake_adapter import FakeShippingNotifier

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=UTC)


@pytest.fixture
def clock():
    return FixedClock(NOW)


@pytest.fixture
def notifier():
    return FakeShippingNotifier()


@pytest.fixture
def presenter():
    return FakeReceiptPresenter()


@pytest.fixture
def engine(clock, notifier, presenter):
    return CheckoutEngine(clock=clock, notifier=notifier, presenter=presenter, settings=CheckoutSettings())


@pytest.fixture
def cheese():
    return Product.create("Cheese", 100, 10, weight_kg=0.4, expires_at=NOW + timedelta(days=7))


@pytest.fixture
def biscuits():
    return Product.create("Biscuits", 150, 5, weight_kg=0.7, expires_at=NOW + timedelta(days=30))


@pytest.fixture
def tv():
    return Product.create("TV", 1000, 3, weight_kg=15.0)


@pytest.fixture
def scratch_card():
    return Product.create("Mobile scratch card", 50, 100)


@pytest.fixture
def expired_cheese():
    return Product.create("Expired Cheese", 100, 5, weight_kg=0.4, expires_at=NOW - timedelta(days=1))


@pytest.fixture
def customer():
    return Customer(name="John Doe", balance=5000)


@pytest.fixture
def cart():
    return ShoppingCart()
