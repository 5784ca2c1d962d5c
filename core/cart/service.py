"""Cart store: the single source of truth for what a visitor intends to buy."""
import json
from datetime import datetime, timezone
from decimal import Decimal
from typing import Callable, List, Optional

from core.logging import get_logger, sanitize_id_for_logging
from core.services.models import Product
from .models import Cart, CartItem
from .storage import CartStorage, RedisCartStorage

logger = get_logger(__name__)

CartListener = Callable[[Cart], None]


class CartStore:
    """
    Owns one session's cart.

    All operations are synchronous and in-memory. Every mutation is written
    to the storage backend (best effort) and then published to subscribers.

    Features:
    - One line per product id; re-adding increments the quantity
    - Quantity <= 0 on update removes the line
    - Restores the previous state for the session on init
    """

    def __init__(self, session_id: str, storage: CartStorage):
        if not session_id:
            raise ValueError("session_id must be a non-empty string")
        self.session_id = session_id
        self.storage = storage
        self._listeners: List[CartListener] = []
        self._cart = self._restore()

    # ==================== STATE ====================

    @property
    def cart(self) -> Cart:
        return self._cart

    @property
    def items(self) -> List[CartItem]:
        return list(self._cart.items)

    @property
    def is_empty(self) -> bool:
        return self._cart.is_empty

    def get_item_count(self) -> int:
        """Total units across all lines (cart badge)."""
        return self._cart.total_items

    def get_subtotal(self) -> Decimal:
        """Σ captured price × quantity."""
        return self._cart.subtotal

    # ==================== MUTATIONS ====================

    def add_item(self, product: Product, quantity: int = 1) -> Cart:
        """Add units of a product, merging into an existing line if present."""
        if not product or not product.id:
            raise ValueError("product.id must be a non-empty string")
        if not isinstance(quantity, int) or isinstance(quantity, bool) or quantity < 1:
            raise ValueError("quantity must be a positive integer")

        existing = self._cart.find(product.id)
        if existing:
            existing.quantity += quantity
        else:
            self._cart.items.append(CartItem(product=product, quantity=quantity))

        self._commit()
        return self._cart

    def update_quantity(self, product_id: str, new_quantity: int) -> Cart:
        """Set a line's quantity; zero or negative removes the line."""
        if not isinstance(new_quantity, int) or isinstance(new_quantity, bool):
            raise ValueError("quantity must be an integer")

        item = self._cart.find(product_id)
        if item is None:
            return self._cart

        if new_quantity <= 0:
            self._cart.items = [i for i in self._cart.items if i.product_id != product_id]
        else:
            item.quantity = new_quantity

        self._commit()
        return self._cart

    def remove_item(self, product_id: str) -> Cart:
        """Delete the line for product_id if present."""
        if self._cart.find(product_id) is None:
            return self._cart
        return self.update_quantity(product_id, 0)

    def clear(self) -> Cart:
        """Empty the cart (explicit clear or after checkout)."""
        self._cart.items = []
        self._commit()
        return self._cart

    # ==================== SUBSCRIBERS ====================

    def subscribe(self, listener: CartListener) -> Callable[[], None]:
        """Register a callback run after every mutation. Returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self._cart)
            except Exception:
                logger.exception("Cart listener failed")

    # ==================== PERSISTENCE ====================

    def _commit(self) -> None:
        self._cart.updated_at = datetime.now(timezone.utc).isoformat()
        self._persist()
        self._notify()

    def _persist(self) -> None:
        """Write the cart to storage; failures leave the in-memory cart authoritative."""
        try:
            if self._cart.is_empty:
                self.storage.delete(self.session_id)
            else:
                self.storage.save(self.session_id, json.dumps(self._cart.to_dict()))
        except Exception as e:
            logger.warning(
                f"Cart persistence failed for session {sanitize_id_for_logging(self.session_id)}: {e}"
            )

    def _restore(self) -> Cart:
        try:
            data = self.storage.load(self.session_id)
        except Exception as e:
            logger.warning(
                f"Cart storage unavailable for session {sanitize_id_for_logging(self.session_id)}: {e}"
            )
            return Cart(session_id=self.session_id)

        if not data:
            return Cart(session_id=self.session_id)

        try:
            cart = Cart.from_dict(json.loads(data))
            cart.session_id = self.session_id
            return cart
        except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
            # Corrupted data - start fresh
            logger.warning(
                f"Corrupted cart data for session {sanitize_id_for_logging(self.session_id)}: {e}"
            )
            return Cart(session_id=self.session_id)

    # ==================== SUMMARY ====================

    def summary(self) -> dict:
        """Plain-dict view of the cart for API responses."""
        return {
            "session_id": self.session_id,
            "is_empty": self.is_empty,
            "item_count": self.get_item_count(),
            "subtotal": self.get_subtotal(),
            "items": [
                {
                    "product_id": item.product_id,
                    "name": item.product.name,
                    "category": item.product.category,
                    "image": item.product.image,
                    "unit_price": item.unit_price,
                    "quantity": item.quantity,
                    "total_price": item.total_price,
                }
                for item in self._cart.items
            ],
        }


_default_storage: Optional[CartStorage] = None


def get_cart_storage() -> CartStorage:
    """Get the process-wide cart storage (Redis by default)."""
    global _default_storage
    if _default_storage is None:
        _default_storage = RedisCartStorage()
    return _default_storage


def set_cart_storage(storage: Optional[CartStorage]) -> None:
    """Swap the process-wide cart storage (local development and tests)."""
    global _default_storage
    _default_storage = storage


def get_cart_store(session_id: str) -> CartStore:
    """Open the cart for a session, restoring persisted state."""
    return CartStore(session_id, get_cart_storage())
