# app/services/order_service.py
from sqlalchemy.orm import Session

from app.domain.exceptions import NotFoundError
from app.domain.schemas import OrderPayload, OrderItemPayload
from app.repos.cart_repo import CartRepo
from app.repos.user_repo import UserRepo
from app.services.order_client import OrderClient
from app.utils.logging import get_logger

logger = get_logger(__name__)


class OrderService:
    """
    Zamowienia zyja w order-service, tutaj nic nie zapisujemy.
    Koszyk po zlozeniu zamowienia zostaje bez zmian.
    """

    def __init__(self, db: Session, order_client: OrderClient):
        self.carts = CartRepo(db)
        self.users = UserRepo(db)
        self.order_client = order_client

    def build_payload(self, user_id: int) -> OrderPayload:
        cart = self.carts.get_by_user(user_id)
        if not cart:
            raise NotFoundError("Cart not found")

        user = self.users.get_user(user_id)
        if not user:
            raise NotFoundError("User not found")

        return OrderPayload(
            user_id=user.id,
            street=user.street,
            city=user.city,
            state=user.state,
            country=user.country,
            zip_code=user.zip_code,
            items=[
                OrderItemPayload(
                    product_name=i.product_name,
                    price=float(i.price),
                    quantity=i.quantity,
                )
                for i in cart.items
            ],
            total_price=float(cart.total_price or 0),
        )

    def create_order(self, user_id: int):
        """
        Use Case: Zlozenie zamowienia z koszyka.

        1. Pobiera koszyk i usera (404 gdy brak)
        2. Buduje snapshot pozycji + adres + total koszyka
        3. Przekazuje do order-service i zwraca jego odpowiedz
        """
        payload = self.build_payload(user_id)
        order = self.order_client.create_order(payload.model_dump(mode="json"))
        logger.info(f"Order dla usera {user_id} wyslany do order-service")
        return order

    def list_orders(self, user_id: int):
        return self.order_client.get_user_orders(user_id)

    def get_order(self, order_id: str):
        return self.order_client.get_order(order_id)

    def delete_order(self, order_id: str):
        return self.order_client.delete_order(order_id)
