"""Receipt presenter port — how a completed checkout is shown to the shopper."""

from abc import ABC, abstractmethod

from storefront.checkout.receipt import Receipt


class ReceiptPresenter(ABC):
    """Abstract interface for receipt adapters."""

    @abstractmethod
    def present(self, receipt: Receipt) -> None:
        """Show a receipt. Called once per successful checkout."""
        ...
