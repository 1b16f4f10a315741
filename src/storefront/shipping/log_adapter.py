"""Shipping notifier that writes each notice to the structured log."""

import structlog

from storefront.checkout.shipping import ShipmentManifest
from storefront.shipping.port import ShippingNotifier

logger = structlog.get_logger(__name__)


class LoggingShippingNotifier(ShippingNotifier):
    def notify(self, manifest: ShipmentManifest) -> None:
        logger.info(
            "Shipment requested",
            items=[entry.name for entry in manifest],
            item_count=len(manifest),
            total_weight_kg=round(manifest.total_weight_kg, 3),
        )
