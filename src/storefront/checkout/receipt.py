"""Receipt produced by a successful checkout."""

from collections.abc import Sequence
from decimal import Decimal

from pydantic import BaseModel

from storefront.cart.cart import CartItem


class ReceiptLine(BaseModel):
    model_config = {"frozen": True}

    quantity: int
    name: str
    line_total: Decimal


class Receipt(BaseModel):
    model_config = {"frozen": True}

    customer_name: str
    lines: tuple[ReceiptLine, ...]
    subtotal: Decimal
    shipping_fee: Decimal
    total: Decimal
    balance_after: Decimal

    @classmethod
    def build(
        cls,
        customer_name: str,
        items: Sequence[CartItem],
        subtotal: Decimal,
        shipping_fee: Decimal,
        balance_after: Decimal,
    ) -> "Receipt":
        return cls(
            customer_name=customer_name,
            lines=tuple(
                ReceiptLine(quantity=item.quantity, name=item.name, line_total=item.line_total) for item in items
            ),
            subtotal=subtotal,
            shipping_fee=shipping_fee,
            total=subtotal + shipping_fee,
            balance_after=balance_after,
        )
