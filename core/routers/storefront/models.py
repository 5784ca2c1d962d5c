"""
Storefront API Pydantic Models

Request bodies for cart endpoints. Checkout posts core.orders.CheckoutForm.
"""
from pydantic import BaseModel


# ==================== CART MODELS ====================

class AddToCartRequest(BaseModel):
    product_id: str
    quantity: int = 1


class UpdateCartItemRequest(BaseModel):
    quantity: int
