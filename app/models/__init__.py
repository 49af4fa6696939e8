# Import all models to register them with SQLModel
from app.models.product import Product
from app.models.cart import Cart
from app.models.member import Member
from app.models.support import Support

__all__ = [
    "Product",
    "Cart",
    "Member",
    "Support",
]
