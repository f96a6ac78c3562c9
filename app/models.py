from datetime import datetime, timezone
from typing import Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class StoreConfig(CamelModel):
    nth_order: int = Field(default=5, ge=1)
    discount_percent: int = Field(default=10, ge=0, le=100)


class Product(CamelModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    price: int = Field(ge=0)


class CartLine(CamelModel):
    """One product in a cart. Price and name are copied from the catalog on add."""
    model_config = ConfigDict(frozen=True)

    product_id: str
    name: str
    price: int = Field(ge=0)
    quantity: int = Field(ge=1)

    @property
    def line_total(self) -> int:
        return self.price * self.quantity


class DiscountCode(CamelModel):
    code: str
    discount_percent: int = Field(ge=0, le=100)
    status: Literal["unused", "used"] = "unused"
    created_at: datetime = Field(default_factory=utcnow)
    used_at: Optional[datetime] = None
    # order count this code was issued for
    milestone: int = Field(default=0, exclude=True)

    @property
    def is_used(self) -> bool:
        return self.status == "used"


class Order(CamelModel):
    model_config = ConfigDict(frozen=True)

    id: str
    user_id: str
    items: Tuple[CartLine, ...]
    subtotal: int
    discount_code: Optional[str] = None
    discount_amount: int = 0
    total: int
    created_at: datetime = Field(default_factory=utcnow)


def subtotal_of(lines) -> int:
    return sum(line.line_total for line in lines)
