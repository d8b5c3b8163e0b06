import logging
from fastapi import APIRouter, Request

from fridge.api.dependencies import raise_for_outcome, refrigerator_session
from fridge.utilities.validators import ConsumeInput, ProductInput

router = APIRouter()
logger = logging.getLogger(__name__)


# -------------------- API: Products --------------------
@router.post('/api/products', status_code=201)
def insert_product(payload: ProductInput, request: Request):
    with refrigerator_session(request) as fridge:
        outcome = fridge.insert_product(payload.name, payload.quantity, payload.expiration_date)
        raise_for_outcome(outcome)
        product = fridge.get_product(payload.name)
        return {"success": True, "outcome": outcome.value, "product": product.to_dict()}


@router.post('/api/products/consume')
def consume_product(payload: ConsumeInput, request: Request):
    """Name travels in the body so any stored name (slashes included) can be consumed."""
    with refrigerator_session(request) as fridge:
        outcome = fridge.consume_product(payload.name, payload.quantity)
        raise_for_outcome(outcome)
        product = fridge.get_product(payload.name)
        remaining = product.quantity if product is not None else 0
        return {"success": True, "outcome": outcome.value, "remaining": remaining}


@router.get('/api/status')
def show_status(request: Request):
    """Current products; 'empty' is true when the refrigerator holds nothing."""
    with refrigerator_session(request) as fridge:
        items = [p.to_dict() for p in fridge.show_status()]
    return {"empty": not items, "count": len(items), "items": items}
