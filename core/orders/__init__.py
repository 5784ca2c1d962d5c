"""Order processing module."""
from .checkout import (
    CheckoutForm,
    CheckoutResult,
    CheckoutService,
    validate_checkout_form,
)
from .placement import OrderPlacement, PlacedOrder, generate_order_number
from .status_service import OrderStatusService

__all__ = [
    "CheckoutForm",
    "CheckoutResult",
    "CheckoutService",
    "validate_checkout_form",
    "OrderPlacement",
    "PlacedOrder",
    "generate_order_number",
    "OrderStatusService",
]
