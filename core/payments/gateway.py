"""Payment gateway interface and the simulated gateway used by the storefront."""
import asyncio
import uuid
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Protocol

from core import config
from core.logging import get_logger
from .constants import PaymentMethod

logger = get_logger(__name__)


@dataclass
class PaymentResult:
    success: bool
    payment_id: Optional[str] = None
    error: Optional[str] = None


class PaymentGateway(Protocol):
    """Confirms payment for an order. Implementations must not touch the cart or orders."""

    async def authorize(self, order_number: str, amount: Decimal, method: str) -> PaymentResult: ...


class SimulatedPaymentGateway:
    """
    Stand-in gateway: waits a fixed delay, then approves.

    Cash on delivery is approved without a payment id (collected at the door).
    """

    def __init__(self, delay_seconds: float = config.PAYMENT_DELAY_SECONDS, approve: bool = True):
        self.delay_seconds = delay_seconds
        self.approve = approve

    async def authorize(self, order_number: str, amount: Decimal, method: str) -> PaymentResult:
        if method == PaymentMethod.COD.value:
            return PaymentResult(success=True)

        if self.delay_seconds > 0:
            await asyncio.sleep(self.delay_seconds)

        if not self.approve:
            logger.info(f"Simulated payment declined for order {order_number}")
            return PaymentResult(success=False, error="Payment declined")

        payment_id = f"sim_{uuid.uuid4().hex[:16]}"
        logger.info(f"Simulated payment {payment_id} approved for order {order_number} ({amount})")
        return PaymentResult(success=True, payment_id=payment_id)


_gateway: Optional[PaymentGateway] = None


def get_payment_gateway() -> PaymentGateway:
    """Get the configured gateway singleton."""
    global _gateway
    if _gateway is None:
        _gateway = SimulatedPaymentGateway()
    return _gateway


def set_payment_gateway(gateway: Optional[PaymentGateway]) -> None:
    global _gateway
    _gateway = gateway
