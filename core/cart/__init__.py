"""Cart package: models, storage, and store."""
from .models import CartItem, Cart
from .service import CartStore, get_cart_store, get_cart_storage, set_cart_storage
from .storage import CartStorage, InMemoryCartStorage, RedisCartStorage

__all__ = [
    "CartItem",
    "Cart",
    "CartStore",
    "CartStorage",
    "InMemoryCartStorage",
    "RedisCartStorage",
    "get_cart_store",
    "get_cart_storage",
    "set_cart_storage",
]
