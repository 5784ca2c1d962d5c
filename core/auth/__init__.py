"""Authentication package."""
from .dependencies import get_admin_session, verify_admin
from .session import (
    AdminSession,
    InMemoryAdminSessionStore,
    RedisAdminSessionStore,
    check_password,
    get_admin_session_store,
    set_admin_session_store,
)

__all__ = [
    "get_admin_session",
    "verify_admin",
    "AdminSession",
    "InMemoryAdminSessionStore",
    "RedisAdminSessionStore",
    "check_password",
    "get_admin_session_store",
    "set_admin_session_store",
]
