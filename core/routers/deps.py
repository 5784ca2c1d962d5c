"""
Shared Dependencies for Routers

Request-scoped accessors for the database, the session cart and the
payment gateway. Routes depend on these instead of the module singletons so
tests can override them through app.dependency_overrides.
"""

from fastapi import Depends, Header, HTTPException

from core.cart import CartStore, get_cart_store
from core.orders import CheckoutService, OrderStatusService
from core.payments import PaymentGateway, get_payment_gateway
from core.services.database import Database, get_database_async


async def get_db() -> Database:
    return await get_database_async()


def get_session_id(x_session_id: str | None = Header(None, alias="X-Session-Id")) -> str:
    """Visitor session id; the cart is keyed by it."""
    session_id = (x_session_id or "").strip()
    if not session_id:
        raise HTTPException(status_code=400, detail="X-Session-Id header required")
    return session_id


def get_cart(session_id: str = Depends(get_session_id)) -> CartStore:
    """Session cart with persisted state restored (sync; runs in the threadpool)."""
    return get_cart_store(session_id)


def get_gateway() -> PaymentGateway:
    return get_payment_gateway()


def get_checkout_service(
    db: Database = Depends(get_db),
    gateway: PaymentGateway = Depends(get_gateway),
) -> CheckoutService:
    return CheckoutService(db, gateway)


def get_order_status_service(db: Database = Depends(get_db)) -> OrderStatusService:
    return OrderStatusService(db)
