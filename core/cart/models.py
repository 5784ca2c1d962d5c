"""Cart models with Decimal-based pricing."""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import List, Optional

from core.services.models import Product
from core.services.money import multiply


@dataclass
class CartItem:
    """A product snapshot and how many units of it the visitor wants.

    The product (and so its price) is captured when the item is added;
    later catalog price changes do not touch lines already in the cart.
    """
    product: Product
    quantity: int
    added_at: str = ""

    def __post_init__(self):
        if not self.added_at:
            self.added_at = datetime.now(timezone.utc).isoformat()

    @property
    def product_id(self) -> str:
        return self.product.id

    @property
    def unit_price(self) -> Decimal:
        return self.product.price

    @property
    def total_price(self) -> Decimal:
        """Price for all units of this line."""
        return multiply(self.product.price, self.quantity)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "product": self.product.model_dump(mode="json"),
            "quantity": self.quantity,
            "added_at": self.added_at,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CartItem":
        """Create from dictionary."""
        quantity = int(data["quantity"])
        if quantity < 1:
            raise ValueError(f"stored quantity must be positive, got {quantity}")
        return cls(
            product=Product.model_validate(data["product"]),
            quantity=quantity,
            added_at=data.get("added_at", ""),
        )


@dataclass
class Cart:
    """Ordered line items for one session (insertion order)."""
    session_id: str
    items: List[CartItem] = field(default_factory=list)
    updated_at: str = ""

    def find(self, product_id: str) -> Optional[CartItem]:
        return next((item for item in self.items if item.product_id == product_id), None)

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def total_items(self) -> int:
        """Sum of quantities (the cart badge number), not distinct lines."""
        return sum(item.quantity for item in self.items)

    @property
    def subtotal(self) -> Decimal:
        return sum((item.total_price for item in self.items), Decimal("0"))

    def to_dict(self) -> dict:
        """Convert to dictionary for Redis storage."""
        return {
            "session_id": self.session_id,
            "items": [item.to_dict() for item in self.items],
            "updated_at": self.updated_at,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Cart":
        """Create from dictionary.

        Duplicate product ids in stored data are merged so the one-line-per-
        product invariant holds for restored carts too.
        """
        cart = cls(session_id=data["session_id"], updated_at=data.get("updated_at", ""))
        for raw in data.get("items", []):
            item = CartItem.from_dict(raw)
            existing = cart.find(item.product_id)
            if existing:
                existing.quantity += item.quantity
            else:
                cart.items.append(item)
        return cart
