"""Database Models - Pydantic models for all entities."""
from decimal import Decimal
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from core.services.money import to_decimal as _to_decimal


class Product(BaseModel):
    """Catalog product (row of the `products` table)."""
    model_config = ConfigDict(extra="ignore")

    id: str
    name: str
    category: str
    price: Decimal
    original_price: Optional[Decimal] = None
    image: str = ""
    images: Optional[list[str]] = None
    description: str = ""
    specifications: Optional[dict[str, str]] = None
    in_stock: bool = True
    featured: bool = False
    created_at: Optional[datetime] = None

    @field_validator("price", mode="before")
    @classmethod
    def convert_price_to_decimal(cls, v):
        return _to_decimal(v)

    @field_validator("original_price", mode="before")
    @classmethod
    def convert_original_price(cls, v):
        # Zero or missing original price means "no discount"
        return _to_decimal(v) if v else None

    @field_validator("featured", mode="before")
    @classmethod
    def default_featured(cls, v):
        return bool(v)

    @field_validator("specifications", mode="before")
    @classmethod
    def stringify_specifications(cls, v):
        if not v or not isinstance(v, dict):
            return None
        return {str(k): str(val) for k, val in v.items()}


class Category(BaseModel):
    """Product category."""
    model_config = ConfigDict(extra="ignore")

    id: str
    name: str
    description: Optional[str] = None
    image: Optional[str] = None
    display_order: Optional[int] = None
    product_count: int = 0


class Customer(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    name: str
    phone: str
    email: Optional[str] = None
    address: Optional[str] = None
    created_at: Optional[datetime] = None


class OrderItem(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = None
    order_id: Optional[str] = None
    product_id: str
    product_name: str
    product_price: Decimal
    quantity: int = 1
    subtotal: Decimal

    @field_validator("product_price", "subtotal", mode="before")
    @classmethod
    def convert_to_decimal(cls, v):
        return _to_decimal(v)


class Order(BaseModel):
    """Order with optional embedded customer and items (admin listing)."""
    model_config = ConfigDict(extra="ignore")

    id: str
    order_number: str
    customer_id: str
    total_amount: Decimal
    payment_method: str = "online"
    payment_status: str = "pending"
    order_status: str = "pending"
    payment_id: Optional[str] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    customer: Optional[Customer] = None
    items: list[OrderItem] = []

    @field_validator("total_amount", mode="before")
    @classmethod
    def convert_total_to_decimal(cls, v):
        return _to_decimal(v)


class TaxSetting(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    product_id: Optional[str] = None
    state: Optional[str] = None
    tax_percentage: Decimal = Decimal("0")
    is_default: bool = False

    @field_validator("tax_percentage", mode="before")
    @classmethod
    def convert_percentage(cls, v):
        return _to_decimal(v)

    @field_validator("is_default", mode="before")
    @classmethod
    def coerce_default(cls, v):
        return bool(v)


class ShippingSetting(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    product_id: Optional[str] = None
    state: Optional[str] = None
    shipping_charge: Decimal = Decimal("0")
    free_shipping_threshold: Optional[Decimal] = None
    is_default: bool = False

    @field_validator("shipping_charge", mode="before")
    @classmethod
    def convert_charge(cls, v):
        return _to_decimal(v)

    @field_validator("free_shipping_threshold", mode="before")
    @classmethod
    def convert_threshold(cls, v):
        return _to_decimal(v) if v is not None else None

    @field_validator("is_default", mode="before")
    @classmethod
    def coerce_default(cls, v):
        return bool(v)


class GlobalSetting(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    setting_key: str
    setting_value: str
    description: Optional[str] = None


class AboutContent(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str = ""
    title: str
    content: str
