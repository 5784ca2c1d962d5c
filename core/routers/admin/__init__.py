"""
Admin API Router

Admin-only endpoints for managing products, categories, orders, settings
and content. Combines all sub-routers into a single router with tag "admin".
"""
from fastapi import APIRouter

from .auth import router as auth_router
from .products import router as products_router
from .categories import router as categories_router
from .orders import router as orders_router
from .settings import router as settings_router
from .content import router as content_router

# Create main router
router = APIRouter(tags=["admin"])

# Include all sub-routers
router.include_router(auth_router)
router.include_router(products_router)
router.include_router(categories_router)
router.include_router(orders_router)
router.include_router(settings_router)
router.include_router(content_router)

__all__ = ["router"]
