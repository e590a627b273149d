"""
Money value object for amounts shown on the dashboard.

Sums are taken in Decimal so that totals of many small float amounts
do not drift.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Union

CENT = Decimal("0.01")


@dataclass(frozen=True)
class Money:
    """
    Non-negative monetary amount with 2 decimal places.

    Raises:
        ValueError: If amount is negative or cannot be converted.
    """

    amount: Decimal

    def __init__(self, amount: Union[Decimal, float, int, str]) -> None:
        try:
            decimal_amount = Decimal(str(amount)).quantize(
                CENT, rounding=ROUND_HALF_UP
            )
        except Exception as e:
            raise ValueError(f"Invalid amount format: {amount}") from e

        if decimal_amount < 0:
            raise ValueError(f"Amount cannot be negative: {amount}")

        object.__setattr__(self, "amount", decimal_amount)

    @classmethod
    def zero(cls) -> "Money":
        return cls(0)

    @classmethod
    def total(cls, amounts: Iterable[Union["Money", float, int]]) -> "Money":
        """Sum plain numbers or Money values into one Money."""
        result = cls.zero()
        for value in amounts:
            if not isinstance(value, Money):
                value = cls(value)
            result = result + value
        return result

    def __add__(self, other: "Money") -> "Money":
        return Money(self.amount + other.amount)

    def difference(self, other: "Money") -> Decimal:
        """Signed difference; a balance may go below zero, Money may not."""
        return self.amount - other.amount

    def __float__(self) -> float:
        return float(self.amount)

    def format(self, symbol: str = "$") -> str:
        return f"{symbol}{self.amount:,.2f}"

    def __str__(self) -> str:
        return f"{self.amount:,.2f}"

    def __repr__(self) -> str:
        return f"Money('{self.amount}')"
