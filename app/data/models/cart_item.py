import random

from sqlalchemy import Column, Integer, BigInteger, ForeignKey, Numeric, String, UniqueConstraint, CheckConstraint
from sqlalchemy.orm import relationship

from app.data.database import Base


def _random_id_num():
    return random.randint(1, 2**31 - 1)


class CartItemModel(Base):
    __tablename__ = "cart_items"

    id = Column(Integer, primary_key=True)
    # numeryczny identyfikator obok id z bazy, patrz DESIGN.md
    id_num = Column(BigInteger, nullable=True, default=_random_id_num)
    cart_id = Column(Integer, ForeignKey("carts.id", ondelete="CASCADE"), nullable=False, index=True)
    product_id = Column(String(64), nullable=False)
    product_name = Column(String(255), nullable=True)

    quantity = Column(Integer, nullable=False)
    price = Column(Numeric(10, 2), nullable=False)

    cart = relationship("CartModel", back_populates="items")

    __table_args__ = (
        UniqueConstraint("cart_id", "product_id", name="u_cart_product"),
        CheckConstraint("quantity >= 1", name="ck_cart_item_quantity"),
        CheckConstraint("price >= 0", name="ck_cart_item_price"),
    )
