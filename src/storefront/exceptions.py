"""Domain errors raised by the catalogue, cart, customer and checkout modules.

Every error carries a readable message and a ``messages`` dict keyed by the
offending field, the same shape validation errors take elsewhere in the
codebase. None of them are retryable.
"""

from decimal import Decimal


class StorefrontError(Exception):
    """Base class for all storefront domain errors."""

    field = "non_field_errors"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
        self.messages = {self.field: [message]}

    def __str__(self) -> str:
        return self.message


class NotPerishableError(StorefrontError):
    """Expiry was queried on a product that has no expiry date."""

    field = "perishable"

    def __init__(self, product_name: str):
        self.product_name = product_name
        super().__init__(f"Product {product_name} does not expire")


# ---------------------------------------------------------------------------
# Stock and cart errors
# ---------------------------------------------------------------------------
class CartError(StorefrontError):
    """Raised when an item cannot be placed in a cart."""


class InsufficientStockError(CartError):
    field = "quantity"

    def __init__(self, product_name: str, requested: int, available: int):
        self.product_name = product_name
        self.requested = requested
        self.available = available
        super().__init__(f"Not enough stock for {product_name}")


class DuplicateProductError(CartError):
    field = "product"

    def __init__(self, product_name: str):
        self.product_name = product_name
        super().__init__("Product already in cart. Update quantity instead.")


class InvalidQuantityError(CartError):
    field = "quantity"

    def __init__(self, quantity: int):
        self.quantity = quantity
        super().__init__(f"Quantity must be positive, got {quantity}")


class InvalidAmountError(StorefrontError):
    field = "amount"

    def __init__(self, amount: Decimal):
        self.amount = amount
        super().__init__(f"Amount must not be negative, got {amount}")


# ---------------------------------------------------------------------------
# Checkout errors
# ---------------------------------------------------------------------------
class CheckoutError(StorefrontError):
    """Raised when a checkout is rejected. Shared state is left untouched."""


class EmptyCartError(CheckoutError):
    field = "cart"

    def __init__(self):
        super().__init__("Cannot checkout with empty cart")


class OutOfStockError(CheckoutError):
    field = "quantity"

    def __init__(self, product_name: str):
        self.product_name = product_name
        super().__init__(f"Product {product_name} is out of stock")


class ExpiredProductError(CheckoutError):
    field = "expires_at"

    def __init__(self, product_name: str):
        self.product_name = product_name
        super().__init__(f"Product {product_name} is expired")


class InsufficientBalanceError(CheckoutError):
    field = "balance"

    def __init__(self, required: Decimal, available: Decimal):
        self.required = required
        self.available = available
        super().__init__("Insufficient balance")
