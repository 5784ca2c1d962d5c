"""
Storefront Checkout Router

POST /checkout places an order for the session cart and runs payment.
"""
from fastapi import APIRouter, Depends, HTTPException

from core.cart import CartStore
from core.errors import OrderPlacementError, PaymentFailedError
from core.logging import get_logger
from core.orders import CheckoutForm, CheckoutService
from core.services.money import format_inr
from core.routers.deps import get_cart, get_checkout_service

logger = get_logger(__name__)

router = APIRouter(tags=["storefront-checkout"])


@router.post("/checkout")
async def checkout(
    form: CheckoutForm,
    store: CartStore = Depends(get_cart),
    service: CheckoutService = Depends(get_checkout_service),
):
    """
    Place an order.

    400 for an empty cart or invalid form, 402 when payment is declined
    (cart kept), 502 when the order could not be written.
    """
    try:
        result = await service.checkout(store, form)
    except PaymentFailedError as e:
        raise HTTPException(
            status_code=402,
            detail={"message": e.reason, "order_number": e.order_number},
        )
    except OrderPlacementError as e:
        logger.error(f"Checkout failed: {e}", exc_info=True)
        raise HTTPException(status_code=502, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return {
        "success": True,
        **result.to_dict(),
        "total_display": format_inr(result.quote.total),
    }
