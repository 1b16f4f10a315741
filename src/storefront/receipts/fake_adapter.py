"""Fake receipt presenter — keeps receipts in memory for assertions."""

from storefront.checkout.receipt import Receipt
from storefront.receipts.port import ReceiptPresenter


class FakeReceiptPresenter(ReceiptPresenter):
    def __init__(self):
        self.receipts: list[Receipt] = []

    def present(self, receipt: Receipt) -> None:
        self.receipts.append(receipt)

    @property
    def last_receipt(self) -> Receipt | None:
        return self.receipts[-1] if self.receipts else None

    def reset(self) -> None:
        self.receipts.clear()
