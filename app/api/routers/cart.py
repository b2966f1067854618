#app/api/routers/cart.py
from fastapi import APIRouter, Depends, HTTPException, Response

from app.api.deps import Caller, get_caller, get_cart_service
from app.domain.exceptions import NotFoundError
from app.domain.schemas import CartOut, ItemIn, QuantityIn
from app.services.cart_service import CartService

router = APIRouter(prefix="/cart", tags=["cart"], dependencies=[Depends(get_caller)])


@router.get("", response_model=CartOut)
def get_cart(caller: Caller = Depends(get_caller), svc: CartService = Depends(get_cart_service)):
    try:
        return svc.get_cart(caller.user_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/items", response_model=CartOut)
def add_item(
    payload: ItemIn,
    caller: Caller = Depends(get_caller),
    svc: CartService = Depends(get_cart_service),
):
    try:
        return svc.upsert_item(caller.user_id, payload.product_id, payload.quantity)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.put("/items/{product_id}", response_model=CartOut)
def update_item(
    product_id: str,
    payload: QuantityIn,
    caller: Caller = Depends(get_caller),
    svc: CartService = Depends(get_cart_service),
):
    try:
        return svc.update_item_quantity(caller.user_id, product_id, payload.quantity)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/items/{product_id}", response_model=CartOut)
def remove_item(
    product_id: str,
    caller: Caller = Depends(get_caller),
    svc: CartService = Depends(get_cart_service),
):
    try:
        return svc.remove_item(caller.user_id, product_id)
    except NotFoundError as e:
        # brak koszyka przy usuwaniu pozycji to 400, nie 404
        raise HTTPException(status_code=400, detail=str(e))


@router.delete("", status_code=204)
def clear_cart(caller: Caller = Depends(get_caller), svc: CartService = Depends(get_cart_service)):
    try:
        svc.clear(caller.user_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return Response(status_code=204)
