from fastapi import APIRouter, Depends, HTTPException

from app.api.deps import get_caller, get_product_client
from app.services.product_client import ProductClient
from app.utils.rest_client import RemoteServiceError

router = APIRouter(prefix="/products", tags=["products"], dependencies=[Depends(get_caller)])


@router.get("")
def list_products(client: ProductClient = Depends(get_product_client)):
    try:
        return client.get_all_products()
    except RemoteServiceError as e:
        raise HTTPException(status_code=400, detail=e.payload)


@router.get("/{product_id}")
def get_product(product_id: str, client: ProductClient = Depends(get_product_client)):
    try:
        return client.get_product_by_id(product_id)
    except RemoteServiceError as e:
        raise HTTPException(status_code=e.status_code or 400, detail=e.payload)
