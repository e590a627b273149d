from typing import Any

from pydantic import Field, ValidationInfo, field_validator

from .base import Entity

DEFAULT_MIN_STOCK = 5
DEFAULT_UNIT = "unidad"


class Product(Entity):
    """
    Inventory item.

    Attributes:
        name: Product name.
        quantity: Units on hand, never negative.
        min_stock: Reorder threshold.
        price: Unit price.
        unit: Free-text unit label ("Botella 50ml").
    """

    name: str
    quantity: int = Field(default=0, ge=0)
    min_stock: int = Field(default=DEFAULT_MIN_STOCK, ge=0)
    price: float = Field(default=0.0, ge=0)
    unit: str = DEFAULT_UNIT

    @field_validator("quantity", "min_stock", "price", "unit", mode="before")
    @classmethod
    def omitted_uses_default(cls, v: Any, info: ValidationInfo) -> Any:
        if v is None or v == "":
            return cls.model_fields[info.field_name].default
        return v

    @field_validator("price", mode="after")
    @classmethod
    def round_price(cls, v: float) -> float:
        return round(v, 2)

    @property
    def is_low_stock(self) -> bool:
        return self.quantity <= self.min_stock

    def with_stock_delta(self, delta: int) -> "Product":
        """Copy with ``delta`` applied; the result is floored at zero."""
        return self.model_copy(
            update={"quantity": max(0, self.quantity + int(delta))}
        )
