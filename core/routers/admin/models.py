"""
Admin API Pydantic Models

Shared models for all admin endpoints.
"""
from typing import Optional, List
from pydantic import BaseModel


# ==================== AUTH MODELS ====================

class AdminLoginRequest(BaseModel):
    password: str


# ==================== PRODUCT MODELS ====================

class CreateProductRequest(BaseModel):
    name: str
    category: str
    price: float
    image: str
    original_price: Optional[float] = None
    images: Optional[List[str]] = None
    description: str = ""
    specifications: Optional[dict[str, str]] = None
    in_stock: bool = True
    featured: bool = False


class UpdateProductRequest(BaseModel):
    name: Optional[str] = None
    category: Optional[str] = None
    price: Optional[float] = None
    image: Optional[str] = None
    original_price: Optional[float] = None
    images: Optional[List[str]] = None
    description: Optional[str] = None
    specifications: Optional[dict[str, str]] = None
    in_stock: Optional[bool] = None
    featured: Optional[bool] = None


# ==================== CATEGORY MODELS ====================

class CreateCategoryRequest(BaseModel):
    id: str
    name: str
    description: Optional[str] = None
    image: Optional[str] = None
    display_order: Optional[int] = None


class UpdateCategoryRequest(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    display_order: Optional[int] = None


# ==================== ORDER MODELS ====================

class UpdateOrderStatusRequest(BaseModel):
    status: str


# ==================== SETTINGS MODELS ====================

class AddTaxSettingRequest(BaseModel):
    state: Optional[str] = None
    tax_percentage: float
    product_id: Optional[str] = None
    is_default: bool = False


class AddShippingSettingRequest(BaseModel):
    state: Optional[str] = None
    shipping_charge: float
    free_shipping_threshold: Optional[float] = None
    product_id: Optional[str] = None
    is_default: bool = False


class UpdateGlobalSettingRequest(BaseModel):
    value: str


# ==================== CONTENT MODELS ====================

class SaveAboutRequest(BaseModel):
    id: Optional[str] = None
    title: str
    content: str
