# Import all models to register them with SQLModel
from app.models.user import User, UserRole
from app.models.product import Product
from app.models.order import Order
from app.models.cart import Cart

__all__ = [
    "User",
    "UserRole",
    "Product",
    "Order",
    "Cart",
]
