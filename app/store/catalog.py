from typing import List, Optional

from app.models import Product

# Prices in cents
SEED_PRODUCTS = (
    Product(id="p1", name="Wireless Mouse", price=2999),
    Product(id="p2", name="Mechanical Keyboard", price=7999),
    Product(id="p3", name="USB-C Hub", price=4999),
    Product(id="p4", name="Monitor Stand", price=3499),
    Product(id="p5", name="Webcam HD", price=5999),
)

def list_products(store) -> List[Product]:
    return list(store.products)

def find_product(store, product_id: str) -> Optional[Product]:
    return next((p for p in store.products if p.id == product_id), None)
