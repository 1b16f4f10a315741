"""Console shipping notifier — prints the shipment notice to a text stream."""

import sys
from typing import TextIO

from storefront.checkout.shipping import ShipmentManifest
from storefront.shipping.port import ShippingNotifier


def format_shipment_notice(manifest: ShipmentManifest) -> list[str]:
    """Render a manifest as notice lines; weights per item are shown in grams."""
    lines = ["** Shipment notice **"]
    for entry in manifest:
        lines.append(f"{entry.name} {entry.weight_kg * 1000:.0f}g")
    lines.append(f"Total package weight {manifest.total_weight_kg:.1f}kg")
    return lines


class ConsoleShippingNotifier(ShippingNotifier):
    def __init__(self, stream: TextIO | None = None):
        self.stream = stream

    def notify(self, manifest: ShipmentManifest) -> None:
        out = self.stream or sys.stdout
        for line in format_shipment_notice(manifest):
            print(line, file=out)
