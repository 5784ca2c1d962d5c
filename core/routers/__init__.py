"""
FastAPI Routers Package

Storefront and admin endpoints, both included in api/index.py.
"""

from core.routers.admin import router as admin_router
from core.routers.storefront import router as storefront_router

__all__ = [
    "admin_router",
    "storefront_router",
]
