"""Payment and order constants, enums, and aliases."""
from enum import Enum
from typing import Set


class PaymentMethod(str, Enum):
    """Payment methods offered at checkout."""
    ONLINE = "online"  # card, UPI, net banking
    COD = "cod"  # cash on delivery


class PaymentStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"
    FAILED = "failed"


class OrderStatus(str, Enum):
    """
    Order status lifecycle.

    Flow:
        pending -> confirmed -> processing -> shipped -> delivered
                -> cancelled

    - pending: Rows written, payment not yet settled
    - confirmed: Paid online, or accepted as cash on delivery
    - processing / shipped / delivered: fulfilment, set from the admin console
    - cancelled: Payment failed or cancelled by admin (final)
    """
    PENDING = "pending"
    CONFIRMED = "confirmed"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


# Payment method aliases (form input -> canonical)
PAYMENT_METHOD_ALIASES: dict[str, str] = {
    "online": PaymentMethod.ONLINE.value,
    "card": PaymentMethod.ONLINE.value,
    "upi": PaymentMethod.ONLINE.value,
    "netbanking": PaymentMethod.ONLINE.value,
    "cod": PaymentMethod.COD.value,
    "cash": PaymentMethod.COD.value,
    "cash_on_delivery": PaymentMethod.COD.value,
}

ORDER_STATUSES: Set[str] = {status.value for status in OrderStatus}


def normalize_payment_method(method: str | None) -> str:
    """Canonical payment method for a form value; raises ValueError if unknown."""
    key = (method or PaymentMethod.ONLINE.value).strip().lower().replace("-", "_").replace(" ", "_")
    if key not in PAYMENT_METHOD_ALIASES:
        raise ValueError(f"Unsupported payment method: {method}")
    return PAYMENT_METHOD_ALIASES[key]
