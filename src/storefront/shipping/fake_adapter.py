"""Fake shipping notifier — records manifests instead of sending them."""

from storefront.checkout.shipping import ShipmentManifest
from storefront.shipping.port import ShippingNotifier


class FakeShippingNotifier(ShippingNotifier):
    def __init__(self):
        self.notices: list[ShipmentManifest] = []

    def notify(self, manifest: ShipmentManifest) -> None:
        self.notices.append(manifest)

    @property
    def last_notice(self) -> ShipmentManifest | None:
        return self.notices[-1] if self.notices else None

    def reset(self) -> None:
        self.notices.clear()
