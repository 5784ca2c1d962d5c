"""
Admin Orders Router

Order listing and fulfilment status updates.
"""
from typing import Optional

from fastapi import APIRouter, HTTPException, Depends

from core.auth import verify_admin
from core.errors import ERROR_NOT_FOUND
from core.orders import OrderStatusService
from core.services.money import format_inr
from core.routers.deps import get_order_status_service
from .models import UpdateOrderStatusRequest

router = APIRouter(tags=["admin-orders"])


@router.get("/orders")
async def admin_get_orders(
    status: Optional[str] = None,
    admin=Depends(verify_admin),
    service: OrderStatusService = Depends(get_order_status_service),
):
    """All orders with customer and items, newest first; optionally filtered by order status."""
    orders = await service.list_orders()
    if status:
        orders = [o for o in orders if o.order_status == status.lower()]

    return {
        "orders": [
            {**order.model_dump(), "total_display": format_inr(order.total_amount)}
            for order in orders
        ],
        "count": len(orders),
    }


@router.patch("/orders/{order_id}/status")
async def admin_update_order_status(
    order_id: str,
    request: UpdateOrderStatusRequest,
    admin=Depends(verify_admin),
    service: OrderStatusService = Depends(get_order_status_service),
):
    try:
        updated = await service.update_status(order_id, request.status)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if not updated:
        raise HTTPException(status_code=404, detail=ERROR_NOT_FOUND)
    return {"success": True, "order_id": order_id, "status": request.status.strip().lower()}
