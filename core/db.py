"""
Database Module - Supabase and Redis Clients

Provides singleton instances of:
- Async Supabase client for table and storage operations
- Sync Upstash Redis client for carts and admin sessions

Credentials are read from the environment on first use, so importing this
module never fails.
"""

import os
from typing import Optional

from supabase._async.client import AsyncClient, create_client as acreate_client
from upstash_redis import Redis


# Singleton instances
_async_supabase_client: Optional[AsyncClient] = None
_sync_redis_client: Optional[Redis] = None


async def get_supabase() -> AsyncClient:
    """
    Get async Supabase client (singleton).
    Used for all table and storage operations.
    """
    global _async_supabase_client

    if _async_supabase_client is None:
        url = os.environ.get("SUPABASE_URL", "")
        key = os.environ.get("SUPABASE_SERVICE_ROLE_KEY", "")
        if not url or not key:
            raise ValueError("SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY must be set")
        _async_supabase_client = await acreate_client(url, key)

    return _async_supabase_client


def reset_supabase() -> None:
    """Drop the cached client (after shutdown)."""
    global _async_supabase_client
    _async_supabase_client = None


def get_redis_sync() -> Redis:
    """
    Get sync Upstash Redis client (singleton).

    Cart operations run synchronously, so the cart store and the admin
    session flag both use the sync client.
    """
    global _sync_redis_client

    if _sync_redis_client is None:
        # Upstash uses REST_URL and REST_TOKEN
        url = os.environ.get("UPSTASH_REDIS_REST_URL", "")
        token = os.environ.get("UPSTASH_REDIS_REST_TOKEN", "")
        if not url or not token:
            raise ValueError("UPSTASH_REDIS_REST_URL and UPSTASH_REDIS_REST_TOKEN must be set")
        _sync_redis_client = Redis(url=url, token=token)

    return _sync_redis_client


# Redis key prefixes for organization
class RedisKeys:
    """Redis key prefixes for different data types."""

    CART = "cart:"  # cart:{session_id}
    ADMIN_SESSION = "admin:session:"  # admin:session:{token}

    @staticmethod
    def cart_key(session_id: str) -> str:
        return f"{RedisKeys.CART}{session_id}"

    @staticmethod
    def admin_session_key(token: str) -> str:
        return f"{RedisKeys.ADMIN_SESSION}{token}"
