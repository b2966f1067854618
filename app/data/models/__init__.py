#import wszystkich modeli zeby SQLAlchemy je zarejestrowal w base metadata

from app.data.models.user import UserModel
from app.data.models.cart import CartModel
from app.data.models.cart_item import CartItemModel

__all__ = ["UserModel", "CartModel", "CartItemModel"]
