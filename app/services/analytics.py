from typing import Any, Dict, Sequence

from app.models import DiscountCode, Order
from app.services.discounts import DiscountLedger


def compute_stats(orders: Sequence[Order], discount_codes: Sequence[DiscountCode]) -> Dict[str, Any]:
    """Aggregate sales figures; recomputed from scratch on every call."""
    used = sum(1 for d in discount_codes if d.is_used)
    return {
        "totalItemsPurchased": sum(line.quantity for o in orders for line in o.items),
        "totalRevenue": sum(o.total for o in orders),
        "totalDiscountAmount": sum(o.discount_amount for o in orders),
        "totalOrders": len(orders),
        "discountCodes": {
            "total": len(discount_codes),
            "used": used,
            "unused": len(discount_codes) - used,
            "codes": list(discount_codes),
        },
    }


def store_stats(store) -> Dict[str, Any]:
    with store.lock:
        orders = list(store.orders)
        codes = DiscountLedger(store).list_all()
    return compute_stats(orders, codes)
