"""Checkout: turn a cart into an order.

Everything happens under the store lock. The discount code is consumed before
the order counter moves, so an order never qualifies for a code minted by its
own increment. A failed code check raises before anything has been written.
"""

import uuid
from typing import NamedTuple, Optional

import structlog

from app.core.errors import EmptyCart
from app.models import Order, subtotal_of
from app.services.discounts import DiscountLedger, discount_amount
from app.store import cart_store

logger = structlog.get_logger(__name__)


class CheckoutResult(NamedTuple):
    order: Order
    message: str


def checkout(store, user_id: str, discount_code: Optional[str] = None) -> CheckoutResult:
    with store.lock:
        items = tuple(cart_store.get_lines(store, user_id))
        if not items:
            raise EmptyCart("Cart is empty. Add items before checking out.")

        subtotal = subtotal_of(items)
        discount = 0
        applied_code = None
        if discount_code:
            applied = DiscountLedger(store).validate_and_consume(discount_code)
            discount = discount_amount(subtotal, applied.discount_percent)
            applied_code = applied.code

        order = Order(
            id=str(uuid.uuid4()),
            user_id=user_id,
            items=items,
            subtotal=subtotal,
            discount_code=applied_code,
            discount_amount=discount,
            total=subtotal - discount,
        )
        store.orders.append(order)
        store.order_count += 1
        cart_store.clear_cart(store, user_id)
        order_count = store.order_count

    logger.info(
        "order_placed",
        order_id=order.id,
        user_id=user_id,
        total=order.total,
        discount_code=applied_code,
        order_count=order_count,
    )

    if discount > 0:
        message = f'Order placed! You saved {discount} with code "{applied_code}".'
    else:
        message = "Order placed successfully!"
    return CheckoutResult(order=order, message=message)
