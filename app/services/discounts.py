"""Milestone discount codes.

A code becomes available every ``nth_order`` checkouts. The admin asks for it
explicitly through ``POST /admin/generate-discount``; asking twice at the same
order count returns nothing the second time. Codes are single use and are
never deleted, so the ledger doubles as the record for analytics.
"""

import uuid
from typing import List, NamedTuple, Optional

import structlog

from app.core.errors import DiscountAlreadyUsed, InvalidDiscountCode
from app.models import DiscountCode, utcnow

logger = structlog.get_logger(__name__)


class AppliedDiscount(NamedTuple):
    code: str
    discount_percent: int


def is_milestone(order_count: int, nth_order: int) -> bool:
    return order_count > 0 and order_count % nth_order == 0


def next_milestone(order_count: int, nth_order: int) -> int:
    """First milestone strictly after ``order_count``."""
    return (order_count // nth_order + 1) * nth_order


def discount_amount(subtotal: int, percent: int) -> int:
    """``subtotal * percent / 100`` rounded half up, in integer cents."""
    return (subtotal * percent + 50) // 100


class DiscountLedger:
    def __init__(self, store):
        self.store = store

    def _new_code(self) -> str:
        taken = {d.code for d in self.store.discount_codes}
        while True:
            code = uuid.uuid4().hex[:8].upper()
            if code not in taken:
                return code

    def find(self, code: str) -> Optional[DiscountCode]:
        return next((d for d in self.store.discount_codes if d.code == code), None)

    def try_generate(self, order_count: int, nth_order: int, discount_percent: int) -> Optional[DiscountCode]:
        if not is_milestone(order_count, nth_order):
            return None
        with self.store.lock:
            codes = self.store.discount_codes
            expected = order_count // nth_order
            if len(codes) >= expected or any(d.milestone == order_count for d in codes):
                return None
            discount = DiscountCode(
                code=self._new_code(),
                discount_percent=discount_percent,
                milestone=order_count,
            )
            codes.append(discount)
        logger.info("discount_code_generated", code=discount.code, order_count=order_count, percent=discount_percent)
        return discount

    def generate_for_current(self) -> Optional[DiscountCode]:
        with self.store.lock:
            cfg = self.store.config
            return self.try_generate(self.store.order_count, cfg.nth_order, cfg.discount_percent)

    def validate_and_consume(self, code: str) -> AppliedDiscount:
        with self.store.lock:
            discount = self.find(code)
            if discount is None:
                raise InvalidDiscountCode(f'Invalid discount code: "{code}"')
            if discount.is_used:
                raise DiscountAlreadyUsed(f'Discount code "{code}" has already been used.')
            discount.status = "used"
            discount.used_at = utcnow()
        logger.info("discount_code_consumed", code=code)
        return AppliedDiscount(code=discount.code, discount_percent=discount.discount_percent)

    def list_all(self) -> List[DiscountCode]:
        with self.store.lock:
            return [d.model_copy() for d in self.store.discount_codes]
