"""Product record with optional Shippable and Perishable capabilities.

A product is a single record. Whether it ships and whether it expires is
decided by which capability descriptors it carries, not by its class:

    Product(name="TV", unit_price=1000, stock_quantity=3, shippable=Shippable(weight_kg=15))

Every field is frozen against assignment. ``stock_quantity`` is the only one
that changes after construction, and only through ``decrease_stock``.
"""

from datetime import UTC, datetime
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, Field, field_validator

from storefront.exceptions import InsufficientStockError, InvalidQuantityError, NotPerishableError
from storefront.money import to_money


class Capability(Enum):
    """Behavioural facets a product may carry."""

    SHIPPABLE = "Shippable"
    PERISHABLE = "Perishable"


def _as_utc(value: datetime) -> datetime:
    # Naive datetimes are read as UTC so they compare against the clock.
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


class Shippable(BaseModel):
    """Physical goods that need a parcel; weight feeds the shipment manifest."""

    model_config = {"frozen": True}

    weight_kg: float = Field(gt=0)


class Perishable(BaseModel):
    """Goods that cannot be sold after their expiry instant."""

    model_config = {"frozen": True}

    expires_at: datetime

    @field_validator("expires_at")
    @classmethod
    def _normalise_timezone(cls, value: datetime) -> datetime:
        return _as_utc(value)

    def is_expired(self, now: datetime) -> bool:
        """True once ``now`` is strictly after the expiry instant."""
        return _as_utc(now) > self.expires_at


class Product(BaseModel):
    model_config = {"frozen": True}

    name: str = Field(min_length=1)
    unit_price: Decimal = Field(ge=0)
    stock_quantity: int = Field(ge=0)
    shippable: Shippable | None = None
    perishable: Perishable | None = None

    @field_validator("unit_price", mode="before")
    @classmethod
    def _float_price_as_written(cls, value):
        return to_money(value) if isinstance(value, float) else value

    def __hash__(self) -> int:
        return id(self)

    def __eq__(self, other) -> bool:
        return self is other

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(
        cls,
        name: str,
        unit_price: Decimal | float | int | str,
        stock_quantity: int,
        weight_kg: float | None = None,
        expires_at: datetime | None = None,
    ) -> "Product":
        """Build a product, attaching capabilities for the arguments given."""
        return cls(
            name=name,
            unit_price=unit_price,
            stock_quantity=stock_quantity,
            shippable=Shippable(weight_kg=weight_kg) if weight_kg is not None else None,
            perishable=Perishable(expires_at=expires_at) if expires_at is not None else None,
        )

    # -------------------------------------------------------------------
    # Capability queries
    # -------------------------------------------------------------------
    def capabilities(self) -> frozenset[Capability]:
        tags = set()
        if self.shippable is not None:
            tags.add(Capability.SHIPPABLE)
        if self.perishable is not None:
            tags.add(Capability.PERISHABLE)
        return frozenset(tags)

    def requires_shipping(self) -> bool:
        return self.shippable is not None

    def is_perishable(self) -> bool:
        return self.perishable is not None

    def is_expired(self, now: datetime) -> bool:
        """Whether the product has passed its expiry instant at ``now``.

        Only defined for perishable products; asking a product that never
        expires raises ``NotPerishableError``.
        """
        if self.perishable is None:
            raise NotPerishableError(self.name)
        return self.perishable.is_expired(now)

    @property
    def weight_kg(self) -> float | None:
        return self.shippable.weight_kg if self.shippable is not None else None

    # -------------------------------------------------------------------
    # Stock
    # -------------------------------------------------------------------
    def has_stock_for(self, quantity: int) -> bool:
        return quantity <= self.stock_quantity

    def decrease_stock(self, quantity: int) -> None:
        """Remove ``quantity`` units from stock, or raise without changing anything."""
        if quantity < 0:
            raise InvalidQuantityError(quantity)
        if not self.has_stock_for(quantity):
            raise InsufficientStockError(self.name, requested=quantity, available=self.stock_quantity)

        # decrease_stock is the only writer; assignment is rejected by the frozen config.
        self.__dict__["stock_quantity"] = self.stock_quantity - quantity
