"""Product Repository - Product catalog operations."""
from typing import Any, Dict, List, Optional

from .base import BaseRepository
from core.services.models import Product


class ProductRepository(BaseRepository):
    """Product database operations."""

    async def get_all(self) -> List[Product]:
        """Get all products, newest first."""
        result = await self._execute(
            self.client.table("products").select("*").order("created_at", desc=True),
            "select products",
        )
        return [Product(**p) for p in result.data or []]

    async def get_by_id(self, product_id: str) -> Optional[Product]:
        result = await self._execute(
            self.client.table("products").select("*").eq("id", product_id).limit(1),
            "select product",
        )
        return Product(**result.data[0]) if result.data else None

    async def create(self, data: Dict[str, Any]) -> Product:
        result = await self._execute(self.client.table("products").insert(data), "insert product")
        return Product(**result.data[0])

    async def update(self, product_id: str, data: Dict[str, Any]) -> Optional[Product]:
        result = await self._execute(
            self.client.table("products").update(data).eq("id", product_id),
            "update product",
        )
        return Product(**result.data[0]) if result.data else None

    async def delete(self, product_id: str) -> None:
        await self._execute(self.client.table("products").delete().eq("id", product_id), "delete product")
