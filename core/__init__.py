"""
Storefront Core Module

This package contains the core infrastructure components:
- db: Database clients (Supabase + Redis)
- cart: session cart store
- pricing: shipping/tax rules and resolver
- services: repositories, catalog, image storage
- orders: checkout and order placement

Note: Imports are lazy to avoid circular dependency issues
and keep module loading cheap at startup.
"""

# Lazy imports to avoid issues at module load time
__all__ = [
    "get_supabase",
    "get_redis_sync",
]


def __getattr__(name):
    """Lazy attribute access for clean module loading."""
    if name == "get_supabase":
        from core.db import get_supabase
        return get_supabase
    elif name == "get_redis_sync":
        from core.db import get_redis_sync
        return get_redis_sync
    raise AttributeError(f"module 'core' has no attribute '{name}'")
