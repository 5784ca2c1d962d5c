"""Content Repository - About page content."""
from typing import Optional

from .base import BaseRepository
from core.services.models import AboutContent


class ContentRepository(BaseRepository):
    """about_content table (a single row is expected)."""

    async def get_about(self) -> Optional[AboutContent]:
        result = await self._execute(
            self.client.table("about_content").select("*").limit(1), "select about content"
        )
        return AboutContent(**result.data[0]) if result.data else None

    async def update_about(self, content_id: str, title: str, content: str) -> Optional[AboutContent]:
        result = await self._execute(
            self.client.table("about_content")
            .update({"title": title, "content": content})
            .eq("id", content_id),
            "update about content",
        )
        return AboutContent(**result.data[0]) if result.data else None

    async def replace_about(self, title: str, content: str) -> AboutContent:
        """Delete every existing row and insert a single fresh one."""
        await self._execute(
            self.client.table("about_content").delete().neq("id", "00000000-0000-0000-0000-000000000000"),
            "delete about content",
        )
        result = await self._execute(
            self.client.table("about_content").insert({"title": title, "content": content}),
            "insert about content",
        )
        return AboutContent(**result.data[0])
