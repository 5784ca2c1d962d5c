"""
Catalog Admin Service

Write side of the catalog for the admin console: products, categories and
the About page. Storage images owned by a product are cleaned up when the
product's image is replaced or the product is deleted.
"""
import uuid
from decimal import Decimal
from typing import Any, Dict, Optional

from core.logging import get_logger
from core.services.models import AboutContent, Category, Product
from core.services.money import to_decimal, to_float

logger = get_logger(__name__)

PRODUCT_FIELDS = (
    "name",
    "category",
    "price",
    "original_price",
    "image",
    "images",
    "description",
    "specifications",
    "in_stock",
    "featured",
)

CATEGORY_FIELDS = ("name", "description", "image", "display_order")


def _clean_product_data(data: Dict[str, Any]) -> Dict[str, Any]:
    """Keep known columns; money goes over the wire as float."""
    row = {k: v for k, v in data.items() if k in PRODUCT_FIELDS}
    for key in ("price", "original_price"):
        if key in row:
            row[key] = to_float(row[key]) if row[key] else None
    return row


def validate_product_data(data: Dict[str, Any], partial: bool = False) -> None:
    """
    Name and image are required, price must be positive.

    With partial=True only the fields present are checked.
    """
    if not partial or "name" in data:
        if not str(data.get("name") or "").strip():
            raise ValueError("Product name is required")
    if not partial or "image" in data:
        if not str(data.get("image") or "").strip():
            raise ValueError("Product image is required")
    if not partial or "price" in data:
        if to_decimal(data.get("price")) <= Decimal("0"):
            raise ValueError("Price must be greater than 0")


class CatalogAdminService:
    """Product, category and About writes."""

    def __init__(self, db):
        self.db = db

    # ==================== PRODUCTS ====================

    async def create_product(self, data: Dict[str, Any]) -> Product:
        validate_product_data(data)
        row = _clean_product_data(data)
        row["id"] = str(uuid.uuid4())
        product = await self.db.products.create(row)
        logger.info(f"Created product {product.id} ({product.name})")
        return product

    async def update_product(self, product_id: str, data: Dict[str, Any]) -> Optional[Product]:
        """Update a product; returns None if it does not exist."""
        validate_product_data(data, partial=True)
        existing = await self.db.products.get_by_id(product_id)
        if not existing:
            return None

        row = _clean_product_data(data)
        product = await self.db.products.update(product_id, row)

        new_image = row.get("image")
        if product and new_image and existing.image and new_image != existing.image:
            await self.db.images.remove_by_url(existing.image)
        return product

    async def delete_product(self, product_id: str) -> bool:
        """Delete a product and its stored image. False if it does not exist."""
        existing = await self.db.products.get_by_id(product_id)
        if not existing:
            return False

        if existing.image:
            await self.db.images.remove_by_url(existing.image)
        await self.db.products.delete(product_id)
        logger.info(f"Deleted product {product_id}")
        return True

    # ==================== CATEGORIES ====================

    async def create_category(self, data: Dict[str, Any]) -> Category:
        category_id = str(data.get("id") or "").strip()
        name = str(data.get("name") or "").strip()
        if not category_id or not name:
            raise ValueError("Category id and name are required")

        row = {k: v for k, v in data.items() if k in CATEGORY_FIELDS}
        row.update({"id": category_id, "name": name})
        return await self.db.categories.create(row)

    async def update_category(self, category_id: str, data: Dict[str, Any]) -> Optional[Category]:
        row = {k: v for k, v in data.items() if k in CATEGORY_FIELDS}
        if "name" in row and not str(row["name"] or "").strip():
            raise ValueError("Category name is required")
        return await self.db.categories.update(category_id, row)

    # ==================== ABOUT ====================

    async def save_about(self, title: str, content: str, content_id: Optional[str] = None) -> AboutContent:
        """Update the existing row by id, otherwise replace all rows with one."""
        if not (title or "").strip() or not (content or "").strip():
            raise ValueError("Title and content are required")

        if content_id:
            updated = await self.db.content.update_about(content_id, title, content)
            if updated:
                return updated
        return await self.db.content.replace_about(title, content)
