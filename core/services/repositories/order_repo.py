"""Order Repository - Customers, orders and order items."""
from typing import Any, Dict, List, Optional

from .base import BaseRepository
from core.services.models import Customer, Order, OrderItem

ORDER_DETAIL_SELECT = "*, customers(*), order_items(*)"


def _order_from_row(row: Dict[str, Any]) -> Order:
    data = dict(row)
    customer = data.pop("customers", None)
    items = data.pop("order_items", None) or []
    return Order(
        **data,
        customer=Customer(**customer) if customer else None,
        items=[OrderItem(**i) for i in items],
    )


class OrderRepository(BaseRepository):
    """Order database operations.

    Each method is a single remote call; multi-table writes are coordinated
    by core.orders.placement.
    """

    # ==================== CUSTOMERS ====================

    async def create_customer(self, data: Dict[str, Any]) -> Customer:
        result = await self._execute(self.client.table("customers").insert(data), "insert customer")
        return Customer(**result.data[0])

    async def delete_customer(self, customer_id: str) -> None:
        await self._execute(self.client.table("customers").delete().eq("id", customer_id), "delete customer")

    # ==================== ORDERS ====================

    async def create_order(self, data: Dict[str, Any]) -> Order:
        result = await self._execute(self.client.table("orders").insert(data), "insert order")
        return Order(**result.data[0])

    async def delete_order(self, order_id: str) -> None:
        await self._execute(self.client.table("orders").delete().eq("id", order_id), "delete order")

    async def get_by_id(self, order_id: str) -> Optional[Order]:
        result = await self._execute(
            self.client.table("orders").select(ORDER_DETAIL_SELECT).eq("id", order_id).limit(1),
            "select order",
        )
        return _order_from_row(result.data[0]) if result.data else None

    async def get_all_with_details(self) -> List[Order]:
        """All orders with customer and items, newest first."""
        result = await self._execute(
            self.client.table("orders").select(ORDER_DETAIL_SELECT).order("created_at", desc=True),
            "select orders",
        )
        return [_order_from_row(row) for row in result.data or []]

    async def update_status(self, order_id: str, order_status: str) -> bool:
        result = await self._execute(
            self.client.table("orders").update({"order_status": order_status}).eq("id", order_id),
            "update order status",
        )
        return bool(result.data)

    async def update_payment(
        self,
        order_id: str,
        payment_status: str,
        order_status: str,
        payment_id: Optional[str] = None,
    ) -> None:
        data: Dict[str, Any] = {"payment_status": payment_status, "order_status": order_status}
        if payment_id:
            data["payment_id"] = payment_id
        await self._execute(
            self.client.table("orders").update(data).eq("id", order_id),
            "update order payment",
        )

    # ==================== ORDER ITEMS ====================

    async def create_items(self, rows: List[Dict[str, Any]]) -> List[OrderItem]:
        result = await self._execute(self.client.table("order_items").insert(rows), "insert order items")
        return [OrderItem(**r) for r in result.data or []]
