"""
Order Placement

Writes customer -> order -> order_items as one unit. The table API has no
multi-table transaction, so each completed step registers a compensating
delete; if a later step fails the compensations run in reverse order.
"""
import secrets
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Awaitable, Callable, List

from core.errors import ERROR_ORDER_FAILED, OrderPlacementError, RemoteCallError
from core.logging import get_logger
from core.payments import OrderStatus, PaymentStatus
from core.pricing import PriceQuote
from core.services.models import Customer, Order, OrderItem
from core.services.money import round_money, to_float

logger = get_logger(__name__)

Compensation = Callable[[], Awaitable[None]]


def generate_order_number(now: datetime | None = None) -> str:
    """ORD-YYYYMMDD-XXXXXX"""
    now = now or datetime.now(timezone.utc)
    return f"ORD-{now:%Y%m%d}-{secrets.token_hex(3).upper()}"


@dataclass
class PlacedOrder:
    customer: Customer
    order: Order
    items: List[OrderItem] = field(default_factory=list)


class OrderPlacement:
    """Saga over OrderRepository for a single checkout."""

    def __init__(self, orders_repo):
        self.orders = orders_repo

    async def place(
        self,
        customer_data: dict,
        cart_items,
        quote: PriceQuote,
        payment_method: str,
        notes: str | None = None,
    ) -> PlacedOrder:
        """
        Create the customer, order and order item rows.

        Raises:
            OrderPlacementError: a write failed; earlier writes were undone
        """
        compensations: List[Compensation] = []
        order_number = generate_order_number()

        try:
            customer = await self.orders.create_customer(customer_data)
            compensations.append(lambda: self.orders.delete_customer(customer.id))

            order = await self.orders.create_order({
                "order_number": order_number,
                "customer_id": customer.id,
                "total_amount": to_float(quote.total),
                "payment_method": payment_method,
                "payment_status": PaymentStatus.PENDING.value,
                "order_status": OrderStatus.PENDING.value,
                "notes": notes,
            })
            compensations.append(lambda: self.orders.delete_order(order.id))

            rows = [
                {
                    "order_id": order.id,
                    "product_id": item.product_id,
                    "product_name": item.product.name,
                    "product_price": to_float(item.unit_price),
                    "quantity": item.quantity,
                    "subtotal": to_float(round_money(item.total_price)),
                }
                for item in cart_items
            ]
            items = await self.orders.create_items(rows)
        except RemoteCallError as e:
            logger.error(f"Order {order_number} placement failed, rolling back {len(compensations)} step(s): {e}")
            await self._compensate(compensations)
            raise OrderPlacementError(ERROR_ORDER_FAILED) from e

        logger.info(f"Order {order_number} placed for customer {customer.id}")
        return PlacedOrder(customer=customer, order=order, items=items)

    async def _compensate(self, compensations: List[Compensation]) -> None:
        for undo in reversed(compensations):
            try:
                await undo()
            except Exception as e:
                logger.error(f"Compensation step failed, manual cleanup required: {e}")
