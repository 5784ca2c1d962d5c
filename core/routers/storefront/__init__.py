"""Storefront API Router.

Public endpoints for the shop frontend: catalog, session cart, checkout.
Combines all sub-routers into a single router mounted under /api.
"""

from fastapi import APIRouter

from .cart import router as cart_router
from .catalog import router as catalog_router
from .checkout import router as checkout_router

router = APIRouter(tags=["storefront"])

router.include_router(catalog_router)
router.include_router(cart_router)
router.include_router(checkout_router)

__all__ = ["router"]
