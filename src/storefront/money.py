"""Money amounts are Decimals so that balances settle exactly."""

from decimal import Decimal

ZERO = Decimal("0")


def to_money(value) -> Decimal:
    """Coerce ints, strings and floats to Decimal.

    Floats go through their shortest repr, so ``0.1`` becomes ``Decimal("0.1")``.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(repr(value))
    return Decimal(value)
