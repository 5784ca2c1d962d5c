"""Settings Repository - tax, shipping and global settings tables."""
from typing import Any, Dict, List

from .base import BaseRepository
from core.errors import RemoteCallError
from core.logging import get_logger
from core.services.models import GlobalSetting, ShippingSetting, TaxSetting

logger = get_logger(__name__)


class SettingsRepository(BaseRepository):
    """Tax/shipping/global settings operations."""

    async def list_tax_settings(self) -> List[TaxSetting]:
        result = await self._execute(self.client.table("tax_settings").select("*"), "select tax settings")
        return [TaxSetting(**r) for r in result.data or []]

    async def list_shipping_settings(self) -> List[ShippingSetting]:
        result = await self._execute(
            self.client.table("shipping_settings").select("*"), "select shipping settings"
        )
        return [ShippingSetting(**r) for r in result.data or []]

    async def list_global_settings(self) -> List[GlobalSetting]:
        result = await self._execute(
            self.client.table("global_settings").select("*"), "select global settings"
        )
        return [GlobalSetting(**r) for r in result.data or []]

    # Missing or unreadable tables degrade to "no rows configured"

    async def list_tax_settings_safe(self) -> List[TaxSetting]:
        try:
            return await self.list_tax_settings()
        except RemoteCallError:
            return []

    async def list_shipping_settings_safe(self) -> List[ShippingSetting]:
        try:
            return await self.list_shipping_settings()
        except RemoteCallError:
            return []

    async def list_global_settings_safe(self) -> List[GlobalSetting]:
        try:
            return await self.list_global_settings()
        except RemoteCallError:
            return []

    async def add_tax_setting(self, data: Dict[str, Any]) -> TaxSetting:
        result = await self._execute(self.client.table("tax_settings").insert(data), "insert tax setting")
        return TaxSetting(**result.data[0])

    async def add_shipping_setting(self, data: Dict[str, Any]) -> ShippingSetting:
        result = await self._execute(
            self.client.table("shipping_settings").insert(data), "insert shipping setting"
        )
        return ShippingSetting(**result.data[0])

    async def delete_tax_setting(self, setting_id: str) -> None:
        await self._execute(
            self.client.table("tax_settings").delete().eq("id", setting_id), "delete tax setting"
        )

    async def delete_shipping_setting(self, setting_id: str) -> None:
        await self._execute(
            self.client.table("shipping_settings").delete().eq("id", setting_id), "delete shipping setting"
        )

    async def update_global_setting(self, key: str, value: str) -> bool:
        result = await self._execute(
            self.client.table("global_settings").update({"setting_value": value}).eq("setting_key", key),
            "update global setting",
        )
        return bool(result.data)
