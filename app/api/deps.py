# app/api/deps.py
from dataclasses import dataclass

import jwt
from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.data.database import get_db
from app.repos.user_repo import UserRepo
from app.services.cart_service import CartService
from app.services.order_client import OrderClient
from app.services.order_service import OrderService
from app.services.product_client import ProductClient
from app.services.rate_limit_service import RateLimiter
from app.services.user_service import UserService
from app.utils.rest_client import RestClient
from app.utils.security import decode_access_token
from app.utils.settings import ORDER_SERVICE_URL, PRODUCT_SERVICE_URL

bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class Caller:
    user_id: int
    token: str


class RateLimitExceeded(Exception):
    pass


def get_caller(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> Caller:
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise HTTPException(status_code=401, detail="Please authenticate")
    try:
        user_id = decode_access_token(credentials.credentials)
    except jwt.InvalidTokenError:
        raise HTTPException(status_code=401, detail="Please authenticate")

    # token usunietego usera jest niewazny, mimo ze podpis i exp sie zgadzaja
    if UserRepo(db).get_user(user_id) is None:
        raise HTTPException(status_code=401, detail="Please authenticate")
    return Caller(user_id=user_id, token=credentials.credentials)


#klient per request, token callera nie wycieka do innych requestow
def get_order_client(caller: Caller = Depends(get_caller)) -> OrderClient:
    return OrderClient(RestClient(ORDER_SERVICE_URL, token=caller.token))


def get_product_client(caller: Caller = Depends(get_caller)) -> ProductClient:
    return ProductClient(RestClient(PRODUCT_SERVICE_URL, token=caller.token))


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(db)


def get_cart_service(
    db: Session = Depends(get_db),
    product_client: ProductClient = Depends(get_product_client),
) -> CartService:
    return CartService(db=db, product_client=product_client)


def get_order_service(
    db: Session = Depends(get_db),
    order_client: OrderClient = Depends(get_order_client),
) -> OrderService:
    return OrderService(db=db, order_client=order_client)


_rate_limiter: RateLimiter | None = None


def get_rate_limiter() -> RateLimiter:
    global _rate_limiter
    if _rate_limiter is None:
        _rate_limiter = RateLimiter()
    return _rate_limiter


def auth_rate_limit(request: Request, limiter: RateLimiter = Depends(get_rate_limiter)) -> None:
    client = request.client.host if request.client else "unknown"
    if not limiter.hit(client):
        raise RateLimitExceeded()
