"""
Storefront Cart Router

Session cart endpoints. The cart is identified by the X-Session-Id header;
every response carries the full cart summary so the client can re-render.
Cart mutations hit Redis synchronously, so they run in a worker thread.
"""
import asyncio
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from core.cart import CartStore
from core.errors import ERROR_PRODUCT_NOT_FOUND
from core.logging import get_logger
from core.orders import CheckoutService
from core.services.database import Database
from core.services.money import format_inr
from core.routers.deps import get_cart, get_checkout_service, get_db
from .models import AddToCartRequest, UpdateCartItemRequest

logger = get_logger(__name__)

router = APIRouter(tags=["storefront-cart"])


def _cart_response(store: CartStore) -> dict:
    summary = store.summary()
    summary["subtotal_display"] = format_inr(summary["subtotal"])
    return summary


@router.get("/cart")
def get_cart_contents(store: CartStore = Depends(get_cart)):
    return _cart_response(store)


@router.get("/cart/quote")
async def get_cart_quote(
    state: Optional[str] = None,
    store: CartStore = Depends(get_cart),
    checkout: CheckoutService = Depends(get_checkout_service),
):
    """Shipping, tax and total for the cart, resolved for a delivery state."""
    quote = await checkout.quote(store, state)
    return {
        **quote.to_dict(),
        "total_display": format_inr(quote.total),
        "item_count": store.get_item_count(),
    }


@router.post("/cart/items")
async def add_to_cart(
    request: AddToCartRequest,
    store: CartStore = Depends(get_cart),
    db: Database = Depends(get_db),
):
    """Add a product to the cart; re-adding increments the quantity."""
    product = await db.catalog.get_product(request.product_id)
    if not product:
        raise HTTPException(status_code=404, detail=ERROR_PRODUCT_NOT_FOUND)

    try:
        await asyncio.to_thread(store.add_item, product, request.quantity)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    logger.info(f"Added {request.quantity} x {product.id} to cart")
    return _cart_response(store)


@router.patch("/cart/items/{product_id}")
def update_cart_item(
    product_id: str,
    request: UpdateCartItemRequest,
    store: CartStore = Depends(get_cart),
):
    """Set a line's quantity (0 = remove)."""
    store.update_quantity(product_id, request.quantity)
    return _cart_response(store)


@router.delete("/cart/items/{product_id}")
def remove_cart_item(product_id: str, store: CartStore = Depends(get_cart)):
    store.remove_item(product_id)
    return _cart_response(store)


@router.delete("/cart")
def clear_cart(store: CartStore = Depends(get_cart)):
    store.clear()
    return _cart_response(store)
