# app/api/routers/orders.py
from fastapi import APIRouter, Depends, HTTPException

from app.api.deps import Caller, get_caller, get_order_service
from app.domain.exceptions import NotFoundError
from app.services.order_service import OrderService
from app.utils.rest_client import RemoteServiceError

router = APIRouter(prefix="/orders", tags=["orders"], dependencies=[Depends(get_caller)])


@router.post("")
def create_order(caller: Caller = Depends(get_caller), svc: OrderService = Depends(get_order_service)):
    """
    Sklada zamowienie z koszyka callera i przekazuje je do order-service.
    """
    try:
        return svc.create_order(caller.user_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except RemoteServiceError as e:
        raise HTTPException(status_code=400, detail=e.payload)


@router.get("")
def list_orders(caller: Caller = Depends(get_caller), svc: OrderService = Depends(get_order_service)):
    try:
        return svc.list_orders(caller.user_id)
    except RemoteServiceError as e:
        raise HTTPException(status_code=400, detail=e.payload)


@router.get("/{order_id}")
def get_order(order_id: str, svc: OrderService = Depends(get_order_service)):
    try:
        return svc.get_order(order_id)
    except RemoteServiceError as e:
        raise HTTPException(status_code=e.status_code or 400, detail=e.payload)


@router.delete("/{order_id}")
def delete_order(order_id: str, svc: OrderService = Depends(get_order_service)):
    try:
        return svc.delete_order(order_id)
    except RemoteServiceError as e:
        raise HTTPException(status_code=e.status_code or 400, detail=e.payload)
