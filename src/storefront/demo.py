"""Storefront demo — one successful checkout followed by each rejection case.

Usage:
    python -m storefront [--fee 30]
"""

import argparse
from datetime import timedelta
from decimal import Decimal

from storefront.cart.cart import ShoppingCart
from storefront.catalogue.product import Product
from storefront.checkout.engine import CheckoutEngine
from storefront.clock import get_clock
from storefront.config import load_settings
from storefront.customer.customer import Customer
from storefront.exceptions import CartError, CheckoutError
from storefront.utils.logging import configure_logging


def build_catalogue(now):
    return {
        "cheese": Product.create("Cheese", 100, 10, weight_kg=0.4, expires_at=now + timedelta(days=7)),
        "biscuits": Product.create("Biscuits", 150, 5, weight_kg=0.7, expires_at=now + timedelta(days=30)),
        "tv": Product.create("TV", 1000, 3, weight_kg=15.0),
        "scratch_card": Product.create("Mobile scratch card", 50, 100),
    }


def _attempt(engine: CheckoutEngine, customer: Customer, cart: ShoppingCart) -> None:
    try:
        engine.checkout(customer, cart)
    except CheckoutError as exc:
        print(f"Error: {exc}")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Run the storefront checkout demo")
    parser.add_argument("--fee", type=Decimal, default=None, help="Shipping fee per shippable item")
    args = parser.parse_args(argv)

    settings = load_settings()
    if args.fee is not None:
        settings = settings.model_copy(update={"shipping_fee_per_item": args.fee})

    configure_logging(settings)

    clock = get_clock()
    now = clock.now()
    catalogue = build_catalogue(now)
    engine = CheckoutEngine(clock=clock, settings=settings)

    customer = Customer(name="John Doe", balance=5000)
    cart = ShoppingCart()
    cart.add(catalogue["cheese"], 2)
    cart.add(catalogue["biscuits"], 1)
    cart.add(catalogue["tv"], 1)
    cart.add(catalogue["scratch_card"], 3)
    engine.checkout(customer, cart)

    print("\n--- Testing error cases ---")

    _attempt(engine, customer, ShoppingCart())

    expensive_cart = ShoppingCart()
    expensive_cart.add(catalogue["tv"], 1)
    _attempt(engine, Customer(name="Jane Doe", balance=100), expensive_cart)

    expired_cheese = Product.create("Expired Cheese", 100, 5, weight_kg=0.4, expires_at=now - timedelta(days=1))
    expired_cart = ShoppingCart()
    expired_cart.add(expired_cheese, 1)
    _attempt(engine, customer, expired_cart)

    try:
        ShoppingCart().add(catalogue["biscuits"], 10)
    except CartError as exc:
        print(f"Error: {exc}")

    # Stock is only committed at checkout, so a cart can go stale.
    biscuits = catalogue["biscuits"]
    stale_cart = ShoppingCart()
    stale_cart.add(biscuits, biscuits.stock_quantity)
    rival_cart = ShoppingCart()
    rival_cart.add(biscuits, 1)
    engine.checkout(Customer(name="Jane Doe", balance=500), rival_cart)
    _attempt(engine, customer, stale_cart)

    return 0
