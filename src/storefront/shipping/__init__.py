"""Shipping notifier factory.

Provides get_notifier() / set_notifier() to swap implementations, selected
by the STOREFRONT_SHIPPING_NOTIFIER environment variable:
- ``console`` (default) prints the shipment notice
- ``log`` writes it to the structured log
- ``fake`` records it in memory for tests
"""

import os

from storefront.shipping.port import ShippingNotifier

_current_notifier: ShippingNotifier | None = None


def _build_notifier(name: str) -> ShippingNotifier:
    if name == "console":
        from storefront.shipping.console_adapter import ConsoleShippingNotifier

        return ConsoleShippingNotifier()
    if name == "log":
        from storefront.shipping.log_adapter import LoggingShippingNotifier

        return LoggingShippingNotifier()
    if name == "fake":
        from storefront.shipping.fake_adapter import FakeShippingNotifier

        return FakeShippingNotifier()
    raise ValueError(f"Unknown shipping notifier: {name}")


def get_notifier() -> ShippingNotifier:
    """Return the current shipping notifier, building it on first use."""
    global _current_notifier
    if _current_notifier is None:
        _current_notifier = _build_notifier(os.environ.get("STOREFRONT_SHIPPING_NOTIFIER", "console"))
    return _current_notifier


def set_notifier(notifier: ShippingNotifier) -> None:
    """Override the active shipping notifier (useful for tests)."""
    global _current_notifier
    _current_notifier = notifier


def reset_notifier() -> None:
    """Reset to the configured default."""
    global _current_notifier
    _current_notifier = None
