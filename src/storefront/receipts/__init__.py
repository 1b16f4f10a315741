"""Receipt presenter factory.

Provides get_presenter() / set_presenter() to swap implementations, selected
by the STOREFRONT_RECEIPT_PRESENTER environment variable (``console`` by
default, ``log`` or ``fake``).
"""

import os

from storefront.receipts.port import ReceiptPresenter

_current_presenter: ReceiptPresenter | None = None


def _build_presenter(name: str) -> ReceiptPresenter:
    if name == "console":
        from storefront.receipts.console_adapter import ConsoleReceiptPresenter

        return ConsoleReceiptPresenter()
    if name == "log":
        from storefront.receipts.log_adapter import LoggingReceiptPresenter

        return LoggingReceiptPresenter()
    if name == "fake":
        from storefront.receipts.fake_adapter import FakeReceiptPresenter

        return FakeReceiptPresenter()
    raise ValueError(f"Unknown receipt presenter: {name}")


def get_presenter() -> ReceiptPresenter:
    """Return the current receipt presenter, building it on first use."""
    global _current_presenter
    if _current_presenter is None:
        _current_presenter = _build_presenter(os.environ.get("STOREFRONT_RECEIPT_PRESENTER", "console"))
    return _current_presenter


def set_presenter(presenter: ReceiptPresenter) -> None:
    """Override the active receipt presenter (useful for tests)."""
    global _current_presenter
    _current_presenter = presenter


def reset_presenter() -> None:
    """Reset to the configured default."""
    global _current_presenter
    _current_presenter = None
