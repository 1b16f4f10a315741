"""Customer record holding the balance a checkout is settled against."""

from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from storefront.exceptions import InsufficientBalanceError, InvalidAmountError
from storefront.money import to_money


class Customer(BaseModel):
    """A shopper with a prepaid balance.

    The balance never goes below zero and only changes through ``debit``;
    assigning to it is rejected.
    """

    model_config = {"frozen": True}

    name: str = Field(min_length=1)
    balance: Decimal = Field(ge=0)

    @field_validator("balance", mode="before")
    @classmethod
    def _float_balance_as_written(cls, value):
        return to_money(value) if isinstance(value, float) else value

    def __hash__(self) -> int:
        return id(self)

    def __eq__(self, other) -> bool:
        return self is other

    def can_afford(self, amount) -> bool:
        return self.balance >= to_money(amount)

    def debit(self, amount) -> None:
        amount = to_money(amount)
        if amount < 0:
            raise InvalidAmountError(amount)
        if not self.can_afford(amount):
            raise InsufficientBalanceError(required=amount, available=self.balance)

        self.__dict__["balance"] = self.balance - amount
