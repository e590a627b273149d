from datetime import date
from enum import StrEnum

from pydantic import Field, field_validator

from spa_admin.domain.value_objects.money import Money

from .base import Entity


class TransactionType(StrEnum):
    INCOME = "income"
    EXPENSE = "expense"


class Transaction(Entity):
    transaction_date: date = Field(alias="date")
    description: str = ""
    amount: float = Field(..., ge=0)
    type: TransactionType

    @field_validator("amount", mode="before")
    @classmethod
    def validate_amount(cls, v: float | str) -> float:
        try:
            if isinstance(v, str):
                v = v.replace(",", ".")
            amount = float(v)
        except (ValueError, TypeError) as e:
            raise ValueError(f"Invalid amount format: {v}") from e
        if amount < 0:
            raise ValueError(f"Amount cannot be negative: {amount}")
        return round(amount, 2)

    @property
    def is_income(self) -> bool:
        return self.type is TransactionType.INCOME

    @property
    def signed_amount(self) -> float:
        return self.amount if self.is_income else -self.amount

    @property
    def money_amount(self) -> Money:
        return Money(self.amount)
