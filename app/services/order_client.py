# app/services/order_client.py
from app.utils.rest_client import RestClient, RemoteServiceError
from app.utils.settings import ORDER_SERVICE_URL
from app.utils.logging import get_logger

logger = get_logger(__name__)


class OrderClient:
    """
    Proxy do order-service. Bez retry i cache,
    blad jest logowany i rzucany dalej bez zmian.
    """

    base_path = "/api/v1/order"

    def __init__(self, api: RestClient | None = None):
        self.api = api or RestClient(ORDER_SERVICE_URL)

    def get_user_orders(self, user_id: int):
        try:
            return self.api.get(f"{self.base_path}/user/{user_id}")
        except RemoteServiceError as e:
            logger.error(f"Error fetching user orders: {e.payload}")
            raise

    def get_order(self, order_id: str):
        try:
            return self.api.get(f"{self.base_path}/{order_id}")
        except RemoteServiceError as e:
            logger.error(f"Error fetching order: {e.payload}")
            raise

    def create_order(self, payload: dict):
        try:
            return self.api.post(self.base_path, payload)
        except RemoteServiceError as e:
            logger.error(f"Error creating order: {e.payload}")
            raise

    def delete_order(self, order_id: str):
        try:
            return self.api.delete(f"{self.base_path}/{order_id}")
        except RemoteServiceError as e:
            logger.error(f"Error deleting order: {e.payload}")
            raise

    def delete_user_orders(self, user_id: int):
        try:
            return self.api.delete(f"{self.base_path}/user/{user_id}")
        except RemoteServiceError as e:
            logger.error(f"Error deleting user orders: {e.payload}")
            raise
