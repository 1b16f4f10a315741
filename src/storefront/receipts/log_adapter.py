"""Receipt presenter that writes receipts to the structured log."""

import structlog

from storefront.checkout.receipt import Receipt
from storefront.receipts.port import ReceiptPresenter

logger = structlog.get_logger(__name__)


class LoggingReceiptPresenter(ReceiptPresenter):
    def present(self, receipt: Receipt) -> None:
        logger.info(
            "Receipt issued",
            customer=receipt.customer_name,
            lines=[f"{line.quantity}x {line.name}" for line in receipt.lines],
            subtotal=str(receipt.subtotal),
            shipping_fee=str(receipt.shipping_fee),
            total=str(receipt.total),
            balance_after=str(receipt.balance_after),
        )
