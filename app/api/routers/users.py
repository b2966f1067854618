from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response

from app.api.deps import get_caller, get_order_client, get_user_service
from app.domain.exceptions import AlreadyExistsError, NotFoundError
from app.domain.schemas import UserRead, UserUpdate
from app.services.order_client import OrderClient
from app.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"], dependencies=[Depends(get_caller)])


@router.get("", response_model=List[UserRead])
def list_users(svc: UserService = Depends(get_user_service)):
    return svc.list_users()


@router.get("/{user_id}", response_model=UserRead)
def get_user(user_id: int, svc: UserService = Depends(get_user_service)):
    try:
        return svc.get_user(user_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.put("/{user_id}", response_model=UserRead)
def update_user(user_id: int, payload: UserUpdate, svc: UserService = Depends(get_user_service)):
    try:
        return svc.update_user(user_id, payload)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except AlreadyExistsError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.delete("/{user_id}", status_code=204)
def delete_user(
    user_id: int,
    svc: UserService = Depends(get_user_service),
    order_client: OrderClient = Depends(get_order_client),
):
    try:
        svc.delete_user(user_id, order_client)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return Response(status_code=204)
