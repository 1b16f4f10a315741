"""Runtime settings for the checkout engine, read from environment variables."""

import os
from decimal import Decimal

from pydantic import BaseModel, Field

DEFAULT_SHIPPING_FEE_PER_ITEM = Decimal("30")


class CheckoutSettings(BaseModel):
    model_config = {"frozen": True}

    shipping_fee_per_item: Decimal = Field(default=DEFAULT_SHIPPING_FEE_PER_ITEM, ge=0)
    environment: str = "development"
    log_level: str | None = None


def load_settings() -> CheckoutSettings:
    """Build settings from ``STOREFRONT_*`` environment variables.

    Unset variables fall back to the model defaults. Values that fail
    validation raise ``pydantic.ValidationError``.
    """
    values = {}

    fee = os.getenv("STOREFRONT_SHIPPING_FEE_PER_ITEM")
    if fee:
        values["shipping_fee_per_item"] = fee

    env = os.getenv("STOREFRONT_ENV") or os.getenv("ENVIRONMENT")
    if env:
        values["environment"] = env.lower()

    level = os.getenv("LOG_LEVEL")
    if level:
        values["log_level"] = level.upper()

    return CheckoutSettings(**values)
