"""
Order Status Management Service

Admin-side status changes. Payment settlement statuses are written by
checkout; this service only moves orders through fulfilment.
"""
from typing import List

from core.logging import get_logger
from core.payments import ORDER_STATUSES
from core.services.models import Order

logger = get_logger(__name__)


class OrderStatusService:
    """Centralized service for order status management."""

    def __init__(self, db):
        self.db = db

    async def list_orders(self) -> List[Order]:
        """All orders with customer and items, newest first."""
        return await self.db.orders.get_all_with_details()

    async def update_status(self, order_id: str, new_status: str) -> bool:
        """
        Set an order's status.

        Returns:
            True if a row was updated, False if the order does not exist

        Raises:
            ValueError: unknown status
        """
        status = (new_status or "").strip().lower()
        if status not in ORDER_STATUSES:
            raise ValueError(f"Invalid order status: {new_status}")

        updated = await self.db.orders.update_status(order_id, status)
        if updated:
            logger.info(f"Updated order {order_id} status to '{status}'")
        else:
            logger.warning(f"No order updated for {order_id}")
        return updated
