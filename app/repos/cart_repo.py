# app/repos/cart_repo.py
from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.data.models.cart import CartModel
from app.data.models.cart_item import CartItemModel


def compute_total(items) -> Decimal:
    return sum((Decimal(i.price) * i.quantity for i in items), Decimal("0.00"))


def prepare_cart_for_save(cart: CartModel) -> CartModel:
    # total zawsze liczony po stronie serwera, nigdy z inputu klienta
    cart.total_price = compute_total(cart.items)
    cart.last_updated = datetime.now(timezone.utc)
    return cart


class CartRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_by_user(self, user_id: int) -> CartModel | None:
        return self.db.execute(
            select(CartModel).where(CartModel.user_id == user_id)
        ).scalar_one_or_none()

    def find_item(self, cart: CartModel, product_id: str) -> CartItemModel | None:
        for item in cart.items:
            if item.product_id == product_id:
                return item
        return None

    def save(self, cart: CartModel) -> CartModel:
        prepare_cart_for_save(cart)
        self.db.add(cart)
        self.db.commit()
        self.db.refresh(cart)
        return cart

    def delete(self, cart: CartModel) -> None:
        self.db.delete(cart)
        self.db.commit()
