
from fastapi import APIRouter, Depends
from pydantic import Field
from typing import Optional

from app.models import CamelModel, Order
from app.services.checkout import checkout as run_checkout
from app.store.store import Store, get_store

router = APIRouter()

class CheckoutRequest(CamelModel):
    user_id: str = Field(min_length=1)
    discount_code: Optional[str] = None

class CheckoutResponse(CamelModel):
    order: Order
    message: str

@router.post("", response_model=CheckoutResponse, response_model_exclude_none=True)
def checkout(payload: CheckoutRequest, store: Store = Depends(get_store)):
    result = run_checkout(store, payload.user_id, payload.discount_code)
    return CheckoutResponse(order=result.order, message=result.message)
