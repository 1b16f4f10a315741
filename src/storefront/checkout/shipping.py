"""Shipping fee and manifest calculation.

Both are pure functions of the shippable line items. Printing or sending the
shipment notice is the job of a ``ShippingNotifier`` adapter.
"""

from collections.abc import Sequence
from decimal import Decimal

from pydantic import BaseModel, Field

from storefront.cart.cart import CartItem
from storefront.config import DEFAULT_SHIPPING_FEE_PER_ITEM
from storefront.money import to_money


class ManifestEntry(BaseModel):
    model_config = {"frozen": True}

    name: str
    weight_kg: float = Field(gt=0)


class ShipmentManifest(BaseModel):
    """Parcel contents handed to the shipping notifier."""

    model_config = {"frozen": True}

    entries: tuple[ManifestEntry, ...] = ()

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    def is_empty(self) -> bool:
        return not self.entries

    @property
    def total_weight_kg(self) -> float:
        return sum((entry.weight_kg for entry in self.entries), 0.0)


def shipping_fee(items: Sequence[CartItem], per_item=DEFAULT_SHIPPING_FEE_PER_ITEM) -> Decimal:
    """Flat fee per shippable line item; weight and price play no part."""
    return to_money(per_item) * len(items)


def build_manifest(items: Sequence[CartItem]) -> ShipmentManifest:
    """One entry per line item with the product's unit weight."""
    return ShipmentManifest(
        entries=tuple(ManifestEntry(name=item.product.name, weight_kg=item.product.weight_kg) for item in items)
    )


class ShippingCalculator:
    def __init__(self, fee_per_item=DEFAULT_SHIPPING_FEE_PER_ITEM):
        fee_per_item = to_money(fee_per_item)
        if fee_per_item < 0:
            raise ValueError(f"Shipping fee per item must not be negative, got {fee_per_item}")
        self.fee_per_item = fee_per_item

    def fee(self, items: Sequence[CartItem]) -> Decimal:
        return shipping_fee(items, per_item=self.fee_per_item)

    def manifest(self, items: Sequence[CartItem]) -> ShipmentManifest:
        return build_manifest(items)
