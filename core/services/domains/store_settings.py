"""Tax, shipping and global settings management for the admin console."""
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Optional

from core import config
from core.logging import get_logger
from core.services.models import ShippingSetting, TaxSetting

logger = get_logger(__name__)


def _parse_amount(value: Any, label: str) -> Decimal:
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError):
        raise ValueError(f"{label} must be a number")


def _state_or_error(state: Optional[str]) -> str:
    state = (state or "").strip()
    if not state:
        raise ValueError("State is required")
    return state


class StoreSettingsService:
    """Validation in front of SettingsRepository writes."""

    def __init__(self, db):
        self.db = db

    async def list_all(self) -> Dict[str, list]:
        """All three settings tables; a table that cannot be read is listed as empty."""
        settings = self.db.settings
        return {
            "tax_settings": await settings.list_tax_settings_safe(),
            "shipping_settings": await settings.list_shipping_settings_safe(),
            "global_settings": await settings.list_global_settings_safe(),
        }

    async def add_tax_setting(
        self,
        state: Optional[str],
        tax_percentage: Any,
        product_id: Optional[str] = None,
        is_default: bool = False,
    ) -> TaxSetting:
        state = _state_or_error(state)
        rate = _parse_amount(tax_percentage, "Tax percentage")
        if rate <= 0:
            raise ValueError("Tax percentage must be greater than 0")

        setting = await self.db.settings.add_tax_setting({
            "state": state,
            "tax_percentage": float(rate),
            "product_id": product_id or None,
            "is_default": is_default,
        })
        logger.info(f"Added tax setting {rate}% for {state}")
        return setting

    async def add_shipping_setting(
        self,
        state: Optional[str],
        shipping_charge: Any,
        free_shipping_threshold: Any = None,
        product_id: Optional[str] = None,
        is_default: bool = False,
    ) -> ShippingSetting:
        state = _state_or_error(state)
        charge = _parse_amount(shipping_charge, "Shipping charge")
        if free_shipping_threshold is None:
            free_shipping_threshold = config.DEFAULT_FREE_SHIPPING_THRESHOLD
        threshold = _parse_amount(free_shipping_threshold, "Free shipping threshold")
        if charge < 0:
            raise ValueError("Shipping charge cannot be negative")
        if threshold < 0:
            raise ValueError("Free shipping threshold cannot be negative")

        setting = await self.db.settings.add_shipping_setting({
            "state": state,
            "shipping_charge": float(charge),
            "free_shipping_threshold": float(threshold),
            "product_id": product_id or None,
            "is_default": is_default,
        })
        logger.info(f"Added shipping setting {charge} for {state}")
        return setting

    async def delete_tax_setting(self, setting_id: str) -> None:
        await self.db.settings.delete_tax_setting(setting_id)

    async def delete_shipping_setting(self, setting_id: str) -> None:
        await self.db.settings.delete_shipping_setting(setting_id)

    async def update_global_setting(self, key: str, value: Any) -> bool:
        """Set a global setting by key; False when no such key exists."""
        key = (key or "").strip()
        if not key:
            raise ValueError("Setting key is required")
        return await self.db.settings.update_global_setting(key, str(value))
