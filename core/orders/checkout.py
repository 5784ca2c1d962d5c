"""
Checkout Service

Turns a session cart into an order:

    validate form -> price cart -> place order (pending) -> authorize payment
    -> settle order status -> clear cart

The cart is only cleared once payment is confirmed (or accepted as COD).
"""
import asyncio
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel

from core import config
from core.cart import CartStore
from core.errors import (
    ERROR_CART_EMPTY,
    ERROR_COD_LIMIT,
    ERROR_MISSING_FIELDS,
    ERROR_PAYMENT_FAILED,
    ERROR_TERMS_REQUIRED,
    PaymentFailedError,
    RemoteCallError,
)
from core.logging import get_logger, sanitize_id_for_logging
from core.payments import (
    OrderStatus,
    PaymentGateway,
    PaymentMethod,
    PaymentResult,
    PaymentStatus,
    normalize_payment_method,
)
from core.pricing import PriceQuote, PricingRuleResolver
from .placement import OrderPlacement

logger = get_logger(__name__)

REQUIRED_FIELDS = ("full_name", "phone", "address", "city", "state", "pincode")


class CheckoutForm(BaseModel):
    """Delivery details submitted at checkout."""
    full_name: str = ""
    email: Optional[str] = None
    phone: str = ""
    address: str = ""
    city: str = ""
    state: str = ""
    pincode: str = ""
    agree_terms: bool = False
    payment_method: str = PaymentMethod.ONLINE.value
    notes: Optional[str] = None

    def missing_fields(self) -> list[str]:
        return [name for name in REQUIRED_FIELDS if not str(getattr(self, name) or "").strip()]

    def full_address(self) -> str:
        return f"{self.address.strip()}, {self.city.strip()}, {self.state.strip()} - {self.pincode.strip()}"


def validate_checkout_form(form: CheckoutForm) -> str:
    """Check required fields and terms; returns the canonical payment method."""
    if form.missing_fields():
        raise ValueError(ERROR_MISSING_FIELDS)
    if not form.agree_terms:
        raise ValueError(ERROR_TERMS_REQUIRED)
    return normalize_payment_method(form.payment_method)


@dataclass
class CheckoutResult:
    order_id: str
    order_number: str
    quote: PriceQuote
    payment_method: str
    payment_status: str
    order_status: str
    payment_id: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "order_id": self.order_id,
            "order_number": self.order_number,
            "payment_method": self.payment_method,
            "payment_status": self.payment_status,
            "order_status": self.order_status,
            "payment_id": self.payment_id,
            **self.quote.to_dict(),
        }


class CheckoutService:
    """Checkout over injected database and payment gateway."""

    def __init__(self, db, gateway: PaymentGateway, cod_limit: Decimal = config.COD_LIMIT):
        self.db = db
        self.gateway = gateway
        self.cod_limit = cod_limit
        self.placement = OrderPlacement(db.orders)

    async def load_resolver(self) -> PricingRuleResolver:
        return await PricingRuleResolver.load(self.db.settings)

    async def quote(self, store: CartStore, state: Optional[str] = None) -> PriceQuote:
        """Price the cart for delivery to state using the configured rules."""
        resolver = await self.load_resolver()
        return resolver.quote_cart(store.items, state)

    async def checkout(self, store: CartStore, form: CheckoutForm) -> CheckoutResult:
        """
        Place an order for the session cart.

        Raises:
            ValueError: empty cart, invalid form, COD over the limit
            OrderPlacementError: order rows could not be written
            PaymentFailedError: payment declined or the gateway errored; the
                order is cancelled and the cart left intact
        """
        if store.is_empty:
            raise ValueError(ERROR_CART_EMPTY)
        method = validate_checkout_form(form)

        quote = await self.quote(store, form.state)
        if method == PaymentMethod.COD.value and quote.total >= self.cod_limit:
            raise ValueError(ERROR_COD_LIMIT)

        placed = await self.placement.place(
            customer_data={
                "name": form.full_name.strip(),
                "phone": form.phone.strip(),
                "email": (form.email or "").strip() or None,
                "address": form.full_address(),
            },
            cart_items=store.items,
            quote=quote,
            payment_method=method,
            notes=form.notes,
        )
        order = placed.order

        try:
            payment = await self.gateway.authorize(order.order_number, quote.total, method)
        except Exception as e:
            logger.error(f"Payment authorization error for order {order.order_number}: {e}", exc_info=True)
            payment = PaymentResult(success=False, error=ERROR_PAYMENT_FAILED)

        if not payment.success:
            await self._cancel(order)
            logger.warning(f"Payment failed for order {order.order_number}: {payment.error}")
            raise PaymentFailedError(order.order_number, payment.error or ERROR_PAYMENT_FAILED)

        payment_status = PaymentStatus.PAID.value if method == PaymentMethod.ONLINE.value else PaymentStatus.PENDING.value
        order_status = OrderStatus.CONFIRMED.value
        try:
            await self.db.orders.update_payment(order.id, payment_status, order_status, payment.payment_id)
        except RemoteCallError:
            # Payment is taken; the row needs manual reconciliation
            logger.error(
                f"Order {order.order_number} approved (payment {payment.payment_id}) "
                f"but its status could not be saved",
                exc_info=True,
            )

        await asyncio.to_thread(store.clear)
        logger.info(
            f"Checkout complete: order {order.order_number}, "
            f"session {sanitize_id_for_logging(store.session_id)}, total {quote.total}"
        )

        return CheckoutResult(
            order_id=order.id,
            order_number=order.order_number,
            quote=quote,
            payment_method=method,
            payment_status=payment_status,
            order_status=order_status,
            payment_id=payment.payment_id,
        )

    async def _cancel(self, order) -> None:
        """Mark an unpaid order failed/cancelled; a failed write is logged."""
        try:
            await self.db.orders.update_payment(
                order.id, PaymentStatus.FAILED.value, OrderStatus.CANCELLED.value
            )
        except RemoteCallError:
            logger.error(f"Could not cancel unpaid order {order.order_number}", exc_info=True)
