# app/services/product_client.py
from app.utils.rest_client import RestClient, RemoteServiceError
from app.utils.settings import PRODUCT_SERVICE_URL
from app.utils.logging import get_logger

logger = get_logger(__name__)


class ProductClient:
    base_path = "/api/v1/product"

    def __init__(self, api: RestClient | None = None):
        self.api = api or RestClient(PRODUCT_SERVICE_URL)

    def get_all_products(self) -> list:
        try:
            return self.api.get(self.base_path)
        except RemoteServiceError as e:
            logger.error(f"Error fetching products: {e.payload}")
            raise

    def get_product_by_id(self, product_id: str) -> dict:
        try:
            return self.api.get(f"{self.base_path}/{product_id}")
        except RemoteServiceError as e:
            logger.error(f"Error fetching product {product_id}: {e.payload}")
            raise
