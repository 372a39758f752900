from .notification import Notification
from .product import Product
from .referral import Referral
from .user import User

__all__ = [
    "Notification",
    "Product",
    "Referral",
    "User",
]
