"""Shipping notifier port — where shipment notices for a checkout are sent.

The checkout engine programs against this interface; adapters are swapped
via configuration or injected directly.
"""

from abc import ABC, abstractmethod

from storefront.checkout.shipping import ShipmentManifest


class ShippingNotifier(ABC):
    """Abstract interface for shipment notice adapters."""

    @abstractmethod
    def notify(self, manifest: ShipmentManifest) -> None:
        """Announce a parcel. Called once per checkout that ships anything."""
        ...
