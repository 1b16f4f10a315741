"""Console receipt presenter — prints the checkout receipt to a text stream."""

import sys
from typing import TextIO

from storefront.checkout.receipt import Receipt
from storefront.receipts.port import ReceiptPresenter


def format_receipt(receipt: Receipt) -> list[str]:
    """Render a receipt as printable lines. Amounts are shown without decimals."""
    lines = ["** Checkout receipt **"]
    for line in receipt.lines:
        lines.append(f"{line.quantity}x {line.name} {line.line_total:.0f}")
    lines.append(f"Subtotal {receipt.subtotal:.0f}")
    lines.append(f"Shipping {receipt.shipping_fee:.0f}")
    lines.append(f"Amount {receipt.total:.0f}")
    lines.append(f"Customer balance after payment: {receipt.balance_after:.0f}")
    return lines


class ConsoleReceiptPresenter(ReceiptPresenter):
    def __init__(self, stream: TextIO | None = None):
        self.stream = stream

    def present(self, receipt: Receipt) -> None:
        out = self.stream or sys.stdout
        for line in format_receipt(receipt):
            print(line, file=out)
