"""
Supabase Database Service

Provides the Database facade: one async Supabase client shared by the
repositories, the image storage bucket and the catalog domain.

Usage:
    from core.services.database import get_database

    # In async context (after init_database() called at startup):
    db = get_database()
    product = await db.products.get_by_id("treadmill-pro")

    # At FastAPI startup (lifespan):
    await init_database()
"""

import asyncio
from typing import Optional

from supabase._async.client import AsyncClient

from core.db import get_supabase, reset_supabase
from core.logging import get_logger
from core.services.domains import CatalogAdminService, CatalogService, StoreSettingsService
from core.services.repositories import (
    CategoryRepository,
    ContentRepository,
    OrderRepository,
    ProductRepository,
    SettingsRepository,
)
from core.services.storage import ImageStorage

logger = get_logger(__name__)


class Database:
    """
    Supabase data access for the storefront.

    Repositories are exposed directly (db.products, db.orders, ...);
    the client is injected so tests can pass a fake.
    """

    def __init__(self, client: AsyncClient):
        self.client = client

        self.products = ProductRepository(client)
        self.categories = CategoryRepository(client)
        self.orders = OrderRepository(client)
        self.settings = SettingsRepository(client)
        self.content = ContentRepository(client)
        self.images = ImageStorage(client)

        self.catalog = CatalogService(self)
        self.catalog_admin = CatalogAdminService(self)
        self.store_settings = StoreSettingsService(self)

    @classmethod
    async def create(cls) -> "Database":
        """Async factory method to create Database instance.

        Raises:
            ValueError: Supabase credentials are not set
        """
        return cls(await get_supabase())


# Process-wide facade; created at startup or on the first request that needs it
_db: Optional[Database] = None
_init_lock: Optional[asyncio.Lock] = None


async def init_database() -> Database:
    """Create the shared Database if it does not exist yet.

    Raises:
        ValueError: Supabase credentials are not set
    """
    global _db, _init_lock
    if _db is not None:
        return _db

    if _init_lock is None:
        _init_lock = asyncio.Lock()
    async with _init_lock:
        if _db is None:
            _db = await Database.create()
            logger.info("Storefront database ready")
    return _db


def set_database(db: Optional[Database]) -> None:
    """Install a Database instance directly (fake clients in tests)."""
    global _db
    _db = db


async def close_database() -> None:
    """Sign the client out and forget the shared instance (app shutdown)."""
    global _db
    if _db is None:
        return
    try:
        await _db.client.auth.sign_out()
    except Exception as e:
        logger.warning(f"Supabase sign-out failed during shutdown: {e}")
    _db = None
    reset_supabase()


async def get_database_async() -> Database:
    """Shared Database, initialized on first use."""
    return _db if _db is not None else await init_database()


def get_database() -> Database:
    """Shared Database for code that runs after startup.

    Raises:
        RuntimeError: init_database() has not run and no instance was installed
    """
    if _db is None:
        raise RuntimeError("Database is not initialized; await init_database() first")
    return _db
