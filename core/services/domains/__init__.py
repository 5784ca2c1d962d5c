"""Domain services wrapping repositories."""
from .catalog import CatalogService, Deal
from .catalog_admin import CatalogAdminService
from .store_settings import StoreSettingsService

__all__ = [
    "CatalogService",
    "Deal",
    "CatalogAdminService",
    "StoreSettingsService",
]
