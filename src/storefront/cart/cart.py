"""Shopping cart — line items collected before checkout.

Adding an item checks stock but does not reserve it; stock is only committed
when the checkout engine settles the cart. A product appears at most once,
compared by object identity rather than by name.
"""

from decimal import Decimal

import structlog
from pydantic import BaseModel, Field

from storefront.catalogue.product import Product
from storefront.exceptions import DuplicateProductError, InsufficientStockError, InvalidQuantityError
from storefront.money import ZERO

logger = structlog.get_logger(__name__)


class CartItem(BaseModel):
    """A product reference and the quantity requested for it."""

    model_config = {"frozen": True}

    product: Product
    quantity: int = Field(gt=0)

    @property
    def name(self) -> str:
        return self.product.name

    @property
    def line_total(self) -> Decimal:
        return self.product.unit_price * self.quantity

    def requires_shipping(self) -> bool:
        return self.product.requires_shipping()


class ShoppingCart:
    def __init__(self):
        self._items: list[CartItem] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self):
        return iter(self.items())

    def __repr__(self) -> str:
        return f"ShoppingCart(items={len(self._items)})"

    # -------------------------------------------------------------------
    # Item management
    # -------------------------------------------------------------------
    def contains(self, product: Product) -> bool:
        return any(item.product is product for item in self._items)

    def add(self, product: Product, quantity: int) -> None:
        """Add ``quantity`` units of ``product`` as a new line item."""
        if quantity <= 0:
            raise InvalidQuantityError(quantity)
        if not product.has_stock_for(quantity):
            raise InsufficientStockError(product.name, requested=quantity, available=product.stock_quantity)
        if self.contains(product):
            raise DuplicateProductError(product.name)

        self._items.append(CartItem(product=product, quantity=quantity))
        logger.debug("Item added to cart", product=product.name, quantity=quantity)

    def items(self) -> list[CartItem]:
        """A copy of the line items; changing it leaves the cart as it was."""
        return list(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        self._items.clear()

    # -------------------------------------------------------------------
    # Derived values
    # -------------------------------------------------------------------
    def subtotal(self) -> Decimal:
        return sum((item.line_total for item in self._items), ZERO)

    def shippable_items(self) -> list[CartItem]:
        """Line items whose product ships, in the order they were added."""
        return [item for item in self._items if item.requires_shipping()]
