
from fastapi import APIRouter, Depends, Response
from typing import List, Optional

from app.models import CamelModel, DiscountCode
from app.services.analytics import store_stats
from app.services.discounts import DiscountLedger, next_milestone
from app.store.store import Store, get_store

router = APIRouter()

class GenerateDiscountResponse(CamelModel):
    message: str
    discount: Optional[DiscountCode] = None
    order_count: Optional[int] = None
    nth_order: Optional[int] = None
    hint: Optional[str] = None

class DiscountSummary(CamelModel):
    total: int
    used: int
    unused: int
    codes: List[DiscountCode] = []

class StatsResponse(CamelModel):
    total_items_purchased: int
    total_revenue: int
    total_discount_amount: int
    total_orders: int
    discount_codes: DiscountSummary

@router.post("/generate-discount", response_model=GenerateDiscountResponse, response_model_exclude_none=True)
def generate_discount(response: Response, store: Store = Depends(get_store)):
    with store.lock:
        discount = DiscountLedger(store).generate_for_current()
        order_count, nth_order = store.order_count, store.config.nth_order
    if discount is None:
        return GenerateDiscountResponse(
            message="No discount code generated. Condition not met.",
            order_count=order_count,
            nth_order=nth_order,
            hint=f"Next eligible at order #{next_milestone(order_count, nth_order)}",
        )
    response.status_code = 201
    return GenerateDiscountResponse(message="Discount code generated!", discount=discount)

@router.get("/stats", response_model=StatsResponse, response_model_exclude_none=True)
def stats(store: Store = Depends(get_store)):
    return store_stats(store)
