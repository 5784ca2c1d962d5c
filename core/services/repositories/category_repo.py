"""Category Repository."""
from typing import Any, Dict, List, Optional

from .base import BaseRepository
from core.services.models import Category


class CategoryRepository(BaseRepository):
    """Category database operations."""

    async def get_all(self) -> List[Category]:
        """Get all categories in display order."""
        result = await self._execute(
            self.client.table("categories").select("*").order("display_order"),
            "select categories",
        )
        return [Category(**c) for c in result.data or []]

    async def get_by_id(self, category_id: str) -> Optional[Category]:
        result = await self._execute(
            self.client.table("categories").select("*").eq("id", category_id).limit(1),
            "select category",
        )
        return Category(**result.data[0]) if result.data else None

    async def create(self, data: Dict[str, Any]) -> Category:
        result = await self._execute(self.client.table("categories").insert(data), "insert category")
        return Category(**result.data[0])

    async def update(self, category_id: str, data: Dict[str, Any]) -> Optional[Category]:
        result = await self._execute(
            self.client.table("categories").update(data).eq("id", category_id),
            "update category",
        )
        return Category(**result.data[0]) if result.data else None
