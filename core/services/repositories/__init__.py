"""
Repository Pattern for Database Operations

Provides clean separation of concerns:
- ProductRepository: Product catalog CRUD
- CategoryRepository: Categories CRUD
- OrderRepository: Customers, orders, order items
- SettingsRepository: Tax, shipping and global settings
- ContentRepository: About page content
"""
from .product_repo import ProductRepository
from .category_repo import CategoryRepository
from .order_repo import OrderRepository
from .settings_repo import SettingsRepository
from .content_repo import ContentRepository

__all__ = [
    "ProductRepository",
    "CategoryRepository",
    "OrderRepository",
    "SettingsRepository",
    "ContentRepository",
]
