"""Durable storage backends for session carts."""
from typing import Optional, Protocol

from upstash_redis import Redis

from core.config import CART_TTL_SECONDS
from core.db import RedisKeys, get_redis_sync


class CartStorage(Protocol):
    """Raw key/value persistence for serialized carts."""

    def load(self, session_id: str) -> Optional[str]: ...

    def save(self, session_id: str, payload: str) -> None: ...

    def delete(self, session_id: str) -> None: ...


class RedisCartStorage:
    """Carts in Upstash Redis under cart:{session_id} with a sliding TTL."""

    def __init__(self, redis: Optional[Redis] = None, ttl: int = CART_TTL_SECONDS):
        self._redis = redis
        self.ttl = ttl

    @property
    def redis(self) -> Redis:
        """Get Redis client (lazy initialization)."""
        if self._redis is None:
            self._redis = get_redis_sync()
        return self._redis

    def load(self, session_id: str) -> Optional[str]:
        return self.redis.get(RedisKeys.cart_key(session_id))

    def save(self, session_id: str, payload: str) -> None:
        self.redis.set(RedisKeys.cart_key(session_id), payload, ex=self.ttl)

    def delete(self, session_id: str) -> None:
        self.redis.delete(RedisKeys.cart_key(session_id))


class InMemoryCartStorage:
    """Process-local storage for tests and local development."""

    def __init__(self):
        self.data: dict[str, str] = {}

    def load(self, session_id: str) -> Optional[str]:
        return self.data.get(session_id)

    def save(self, session_id: str, payload: str) -> None:
        self.data[session_id] = payload

    def delete(self, session_id: str) -> None:
        self.data.pop(session_id, None)
