from decimal import Decimal
from sqlalchemy.orm import Session

from app.data.models.cart import CartModel
from app.data.models.cart_item import CartItemModel
from app.domain.exceptions import NotFoundError
from app.domain.schemas import CartOut
from app.repos.cart_repo import CartRepo
from app.services.product_client import ProductClient
from app.utils.rest_client import RemoteServiceError
from app.utils.logging import get_logger

logger = get_logger(__name__)


class CartService:
    """
    Use case'y dla domeny cart, zawsze w kontekscie zalogowanego usera
    commands (upsert, update, remove, clear) modyfikuja stan
    query (get) tylko odczyt
    """

    def __init__(self, db: Session, product_client: ProductClient):
        self.repo = CartRepo(db)
        self.product_client = product_client

    def _require_cart(self, user_id: int) -> CartModel:
        cart = self.repo.get_by_user(user_id)
        if not cart:
            raise NotFoundError("Cart not found")
        return cart

    #query - odczyt
    def get_cart(self, user_id: int) -> CartOut:
        return CartOut.model_validate(self._require_cart(user_id))

    #commands
    def upsert_item(self, user_id: int, product_id: str, quantity: int) -> CartOut:
        # cena to snapshot z momentu dodania, pozniej nie jest weryfikowana
        logger.info(f"Pobieranie danych produktu {product_id} z product-service")
        try:
            pdata = self.product_client.get_product_by_id(product_id)
        except RemoteServiceError as e:
            raise NotFoundError("Product not found") from e

        if not pdata:
            raise NotFoundError("Product not found")

        price = Decimal(str(pdata.get("price", 0)))
        name = pdata.get("name")

        cart = self.repo.get_by_user(user_id)
        if not cart:
            logger.info(f"Tworze nowy koszyk dla uzytkownika {user_id}")
            cart = CartModel(user_id=user_id, items=[])

        existing_item = self.repo.find_item(cart, product_id)
        if existing_item:
            logger.info(
                f"Produkt {product_id} juz jest w koszyku, ustawiam ilosc "
                f"z {existing_item.quantity} na {quantity}"
            )
            existing_item.quantity = quantity
        else:
            logger.info(f"Dodaje nowy produkt {product_id} do koszyka usera {user_id}")
            cart.items.append(
                CartItemModel(
                    product_id=product_id,
                    product_name=name,
                    price=price,
                    quantity=quantity,
                )
            )

        return CartOut.model_validate(self.repo.save(cart))

    def update_item_quantity(self, user_id: int, product_id: str, quantity: int) -> CartOut:
        cart = self._require_cart(user_id)

        item = self.repo.find_item(cart, product_id)
        if not item:
            raise NotFoundError("Item not found in cart")

        item.quantity = quantity
        return CartOut.model_validate(self.repo.save(cart))

    def remove_item(self, user_id: int, product_id: str) -> CartOut:
        cart = self._require_cart(user_id)

        #brak produktu w koszyku to no-op
        item = self.repo.find_item(cart, product_id)
        if item:
            logger.info(f"Usuwanie produktu {product_id} z koszyka {cart.id}")
            cart.items.remove(item)

        return CartOut.model_validate(self.repo.save(cart))

    def clear(self, user_id: int) -> None:
        cart = self._require_cart(user_id)
        self.repo.delete(cart)
        logger.info(f"Koszyk {cart.id} usuniety")
