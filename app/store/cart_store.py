
from typing import Any, Dict, List
import structlog

from app.core.errors import InvalidInput, NotFound
from app.models import CartLine, subtotal_of
from app.store.catalog import find_product

logger = structlog.get_logger(__name__)

def get_lines(store, user_id: str) -> List[CartLine]:
    with store.lock:
        return list(store.carts.get(user_id, []))

def get_cart(store, user_id: str) -> Dict[str, Any]:
    items = get_lines(store, user_id)
    return {"items": items, "subtotal": subtotal_of(items)}

def add_item(store, user_id: str, product_id: str, quantity: int) -> List[CartLine]:
    # bool is an int subclass; reject it along with floats and strings
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
        raise InvalidInput("Quantity must be a positive integer")
    product = find_product(store, product_id)
    if not product:
        raise NotFound(f"Product not found: {product_id}")

    with store.lock:
        cart = store.carts.setdefault(user_id, [])
        idx = next((i for i, line in enumerate(cart) if line.product_id == product_id), None)
        if idx is None:
            cart.append(CartLine(product_id=product.id, name=product.name, price=product.price, quantity=quantity))
        else:
            cart[idx] = cart[idx].model_copy(update={"quantity": cart[idx].quantity + quantity})
        logger.debug("cart_item_added", user_id=user_id, product_id=product_id, quantity=quantity)
        return list(cart)

def remove_item(store, user_id: str, product_id: str) -> List[CartLine]:
    """Take one unit of ``product_id`` out of the cart; missing carts and lines are left alone."""
    with store.lock:
        cart = store.carts.get(user_id)
        if cart is None:
            return []
        idx = next((i for i, line in enumerate(cart) if line.product_id == product_id), None)
        if idx is None:
            return list(cart)
        line = cart[idx]
        if line.quantity <= 1:
            del cart[idx]
        else:
            cart[idx] = line.model_copy(update={"quantity": line.quantity - 1})
        logger.debug("cart_item_removed", user_id=user_id, product_id=product_id)
        return list(cart)

def clear_cart(store, user_id: str) -> None:
    with store.lock:
        store.carts.pop(user_id, None)
