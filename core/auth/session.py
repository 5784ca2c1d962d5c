"""
Admin session flag.

The admin console is guarded by a single shared password. A successful
login stores a flag under admin:session:{token}; the token travels in the
X-Admin-Token header. Logging out removes the flag.
"""
import hmac
import secrets
from typing import Optional, Protocol

from upstash_redis import Redis

from core import config
from core.db import RedisKeys, get_redis_sync
from core.logging import get_logger, sanitize_id_for_logging

logger = get_logger(__name__)


class AdminSessionStore(Protocol):
    def exists(self, token: str) -> bool: ...

    def set(self, token: str) -> None: ...

    def delete(self, token: str) -> None: ...


class RedisAdminSessionStore:
    """Flags in Upstash Redis with a fixed TTL."""

    def __init__(self, redis: Optional[Redis] = None, ttl: int = config.ADMIN_SESSION_TTL_SECONDS):
        self._redis = redis
        self.ttl = ttl

    @property
    def redis(self) -> Redis:
        if self._redis is None:
            self._redis = get_redis_sync()
        return self._redis

    def exists(self, token: str) -> bool:
        return bool(self.redis.exists(RedisKeys.admin_session_key(token)))

    def set(self, token: str) -> None:
        self.redis.set(RedisKeys.admin_session_key(token), "1", ex=self.ttl)

    def delete(self, token: str) -> None:
        self.redis.delete(RedisKeys.admin_session_key(token))


class InMemoryAdminSessionStore:
    def __init__(self):
        self.tokens: set[str] = set()

    def exists(self, token: str) -> bool:
        return token in self.tokens

    def set(self, token: str) -> None:
        self.tokens.add(token)

    def delete(self, token: str) -> None:
        self.tokens.discard(token)


def check_password(candidate: str, expected: Optional[str] = None) -> bool:
    """Constant-time comparison against ADMIN_PASSWORD. An unset password never matches."""
    expected = config.ADMIN_PASSWORD if expected is None else expected
    if not expected or not candidate:
        return False
    return hmac.compare_digest(candidate.encode(), expected.encode())


class AdminSession:
    """Login state for one admin token."""

    def __init__(
        self,
        token: Optional[str],
        store: AdminSessionStore,
        password: Optional[str] = None,
    ):
        self.token = token or None
        self.store = store
        self.password = password
        self._authenticated = False

    @property
    def is_authenticated(self) -> bool:
        return self._authenticated

    def load(self) -> bool:
        """Read the flag for the current token. Store errors count as logged out."""
        if not self.token:
            self._authenticated = False
            return False
        try:
            self._authenticated = self.store.exists(self.token)
        except Exception as e:
            logger.warning(f"Admin session lookup failed for {sanitize_id_for_logging(self.token)}: {e}")
            self._authenticated = False
        return self._authenticated

    def login(self, password: str) -> bool:
        """Set the flag under a fresh token when the password matches."""
        if not check_password(password, self.password):
            logger.warning("Admin login rejected")
            self._authenticated = False
            return False

        self.token = secrets.token_urlsafe(32)
        self.store.set(self.token)
        self._authenticated = True
        logger.info(f"Admin logged in: {sanitize_id_for_logging(self.token)}")
        return True

    def logout(self) -> None:
        if self.token:
            self.store.delete(self.token)
            logger.info(f"Admin logged out: {sanitize_id_for_logging(self.token)}")
        self._authenticated = False


_session_store: Optional[AdminSessionStore] = None


def get_admin_session_store() -> AdminSessionStore:
    global _session_store
    if _session_store is None:
        _session_store = RedisAdminSessionStore()
    return _session_store


def set_admin_session_store(store: Optional[AdminSessionStore]) -> None:
    """Swap the backing store (tests, local development)."""
    global _session_store
    _session_store = store
