# app/api/routers/auth.py
from fastapi import APIRouter, Depends, HTTPException

from app.api.deps import auth_rate_limit, get_user_service
from app.domain.exceptions import AlreadyExistsError, AuthenticationError
from app.domain.schemas import UserCreate, LoginIn, AuthOut
from app.services.user_service import UserService

router = APIRouter(prefix="/auth", tags=["auth"], dependencies=[Depends(auth_rate_limit)])


@router.post("/register", response_model=AuthOut, status_code=201)
def register(payload: UserCreate, svc: UserService = Depends(get_user_service)):
    try:
        return svc.register(payload)
    except AlreadyExistsError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/login", response_model=AuthOut)
def login(payload: LoginIn, svc: UserService = Depends(get_user_service)):
    try:
        return svc.login(payload.email, payload.password)
    except AuthenticationError as e:
        raise HTTPException(status_code=401, detail=str(e))
