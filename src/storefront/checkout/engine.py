"""Checkout engine — validates, prices, ships and settles a cart in one call.

Flow:
    1. Reject an empty cart.
    2. Check every line item, in cart order, for stock and expiry.
    3. Price the cart: subtotal + flat shipping fee per shippable item.
    4. Reject if the customer cannot cover the total.
    5. Notify shipping (only if something ships).
    6. Debit the customer and decrement stock for every item.
    7. Present the receipt and clear the cart.

Every check that can fail runs before the first side effect, so a rejected
checkout leaves the customer, the products and the cart exactly as they were.

The engine holds no state between calls and takes no locks. Callers that run
checkouts concurrently over shared products or customers must serialise
steps 1-6 themselves.
"""

from storefront.cart.cart import CartItem, ShoppingCart
from storefront.checkout.receipt import Receipt
from storefront.checkout.shipping import ShippingCalculator
from storefront.clock import get_clock
from storefront.clock.port import Clock
from storefront.config import CheckoutSettings, load_settings
from storefront.customer.customer import Customer
from storefront.exceptions import (
    CheckoutError,
    EmptyCartError,
    ExpiredProductError,
    InsufficientBalanceError,
    OutOfStockError,
)
from storefront.receipts import get_presenter
from storefront.receipts.port import ReceiptPresenter
from storefront.shipping import get_notifier
from storefront.shipping.port import ShippingNotifier
from storefront.utils.logging import add_context, clear_context, get_logger

logger = get_logger(__name__)


class CheckoutEngine:
    def __init__(
        self,
        clock: Clock | None = None,
        notifier: ShippingNotifier | None = None,
        presenter: ReceiptPresenter | None = None,
        settings: CheckoutSettings | None = None,
    ):
        self.settings = settings or load_settings()
        self.clock = clock or get_clock()
        self.notifier = notifier or get_notifier()
        self.presenter = presenter or get_presenter()
        self.shipping = ShippingCalculator(self.settings.shipping_fee_per_item)

    def checkout(self, customer: Customer, cart: ShoppingCart) -> Receipt:
        """Settle ``cart`` against ``customer`` and return the receipt.

        Raises one of ``EmptyCartError``, ``OutOfStockError``,
        ``ExpiredProductError`` or ``InsufficientBalanceError``; in every
        such case nothing has been mutated.
        """
        add_context(customer=customer.name, item_count=len(cart))
        try:
            return self._checkout(customer, cart)
        except CheckoutError as exc:
            logger.warning(
                "Checkout rejected",
                reason=type(exc).__name__,
                product=getattr(exc, "product_name", None),
                error=str(exc),
            )
            raise
        finally:
            clear_context()

    def _checkout(self, customer: Customer, cart: ShoppingCart) -> Receipt:
        logger.debug("Checkout started")

        items = self._validate(cart)

        shippable = cart.shippable_items()
        subtotal = cart.subtotal()
        shipping_fee = self.shipping.fee(shippable)
        total = subtotal + shipping_fee

        if not customer.can_afford(total):
            raise InsufficientBalanceError(required=total, available=customer.balance)

        # Nothing below may fail: stock and balance were proven sufficient above.
        if shippable:
            self.notifier.notify(self.shipping.manifest(shippable))

        customer.debit(total)
        for item in items:
            item.product.decrease_stock(item.quantity)

        receipt = Receipt.build(
            customer_name=customer.name,
            items=items,
            subtotal=subtotal,
            shipping_fee=shipping_fee,
            balance_after=customer.balance,
        )
        self.presenter.present(receipt)
        cart.clear()

        logger.info(
            "Checkout completed",
            subtotal=str(subtotal),
            shipping_fee=str(shipping_fee),
            total=str(receipt.total),
            balance_after=str(receipt.balance_after),
        )
        return receipt

    def _validate(self, cart: ShoppingCart) -> list[CartItem]:
        if cart.is_empty():
            raise EmptyCartError()

        now = self.clock.now()
        items = cart.items()
        for item in items:
            product = item.product
            if not product.has_stock_for(item.quantity):
                raise OutOfStockError(product.name)
            if product.is_perishable() and product.is_expired(now):
                raise ExpiredProductError(product.name)
        return items
