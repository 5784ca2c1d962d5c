"""Payment processing module."""
from .constants import (
    ORDER_STATUSES,
    OrderStatus,
    PAYMENT_METHOD_ALIASES,
    PaymentMethod,
    PaymentStatus,
    normalize_payment_method,
)
from .gateway import (
    PaymentGateway,
    PaymentResult,
    SimulatedPaymentGateway,
    get_payment_gateway,
    set_payment_gateway,
)

__all__ = [
    "ORDER_STATUSES",
    "OrderStatus",
    "PAYMENT_METHOD_ALIASES",
    "PaymentMethod",
    "PaymentStatus",
    "normalize_payment_method",
    "PaymentGateway",
    "PaymentResult",
    "SimulatedPaymentGateway",
    "get_payment_gateway",
    "set_payment_gateway",
]
