"""In-memory state shared by the cart, ledger and checkout.

One ``Store`` is built at startup and handed to the routes through the
``get_store`` dependency. Tests build their own and call ``reset()``.
"""

import threading
from typing import Dict, List, Optional

from fastapi import Request

from app.core.config import settings
from app.models import CartLine, DiscountCode, Order, Product, StoreConfig
from app.store.catalog import SEED_PRODUCTS


class Store:
    def __init__(self, config: Optional[StoreConfig] = None):
        # Held for every mutation; checkout holds it across consume + counter increment
        self.lock = threading.RLock()
        self.config = config or StoreConfig()
        self.reset(config)

    def reset(self, config: Optional[StoreConfig] = None) -> None:
        with self.lock:
            self.products: List[Product] = list(SEED_PRODUCTS)
            self.carts: Dict[str, List[CartLine]] = {}
            self.orders: List[Order] = []
            self.discount_codes: List[DiscountCode] = []
            self.order_count = 0
            self.config = config or self.config


def build_store() -> Store:
    return Store(StoreConfig(nth_order=settings.NTH_ORDER, discount_percent=settings.DISCOUNT_PERCENT))


def get_store(request: Request) -> Store:
    return request.app.state.store
