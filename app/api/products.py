from fastapi import APIRouter, Depends, HTTPException
from typing import List

from app.models import Product
from app.store.catalog import find_product, list_products
from app.store.store import Store, get_store

router = APIRouter()

@router.get('', response_model=List[Product])
def products(store: Store = Depends(get_store)):
    return list_products(store)

@router.get('/{product_id}', response_model=Product)
def get_product(product_id: str, store: Store = Depends(get_store)):
    obj = find_product(store, product_id)
    if not obj: raise HTTPException(status_code=404, detail=f'Product not found: {product_id}')
    return obj
