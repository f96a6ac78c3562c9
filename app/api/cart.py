
from fastapi import APIRouter, Depends
from pydantic import Field, StrictInt
from typing import List

from app.models import CamelModel, CartLine
from app.store import cart_store
from app.store.store import Store, get_store

router = APIRouter()

class CartItemAdd(CamelModel):
    user_id: str = Field(min_length=1)
    product_id: str = Field(min_length=1)
    quantity: StrictInt = Field(ge=1)

class CartItemRemove(CamelModel):
    user_id: str = Field(min_length=1)
    product_id: str = Field(min_length=1)

class CartRead(CamelModel):
    items: List[CartLine] = []
    subtotal: int = 0

class CartMutation(CamelModel):
    message: str
    cart: List[CartLine]

@router.post("/add", response_model=CartMutation)
def add_item(payload: CartItemAdd, store: Store = Depends(get_store)):
    cart = cart_store.add_item(store, payload.user_id, payload.product_id, payload.quantity)
    return CartMutation(message="Item added to cart", cart=cart)

@router.post("/remove", response_model=CartMutation)
def remove_item(payload: CartItemRemove, store: Store = Depends(get_store)):
    cart = cart_store.remove_item(store, payload.user_id, payload.product_id)
    return CartMutation(message="Item removed from cart", cart=cart)

@router.get("/{user_id}", response_model=CartRead)
def get_cart(user_id: str, store: Store = Depends(get_store)):
    return cart_store.get_cart(store, user_id)
