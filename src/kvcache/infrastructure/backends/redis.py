"""Redis store implementation."""

import logging
import math
import re
from collections.abc import AsyncIterator
from typing import Any

import redis.asyncio as redis

from kvcache.core.entities.cache_config import CacheConfig

logger = logging.getLogger(__name__)

_GLOB_SPECIAL = re.compile(r"([*?\[\]\\])")


class RedisStore:
    """Key-value store backed by Redis.

    Pattern scanning uses SCAN rather than KEYS so large keyspaces are
    enumerated incrementally, and batch deletes are pipelined.
    """

    def __init__(
        self,
        client: redis.Redis,
        key_prefix: str = "",
    ) -> None:
        """Initialize the Redis store.

        Args:
            client: A ``redis.asyncio.Redis`` client.
            key_prefix: Optional prefix for all keys, joined with ``:``.
        """
        self._redis = client
        self._key_prefix = f"{key_prefix}:" if key_prefix else ""
        # Literal form of the prefix for SCAN MATCH.
        self._match_prefix = _GLOB_SPECIAL.sub(r"\\\1", self._key_prefix)
        self._closed = False

    @classmethod
    def from_url(
        cls,
        redis_url: str = "redis://localhost:6379",
        key_prefix: str = "",
        **kwargs: Any,
    ) -> "RedisStore":
        """Create a store from a Redis connection URL."""
        return cls(redis.from_url(redis_url, **kwargs), key_prefix=key_prefix)

    @classmethod
    def from_config(cls, config: CacheConfig) -> "RedisStore":
        """Create a store from a CacheConfig.

        Args:
            config: The cache configuration. ``url`` wins over the
                individual connection fields when set.

        Returns:
            A new RedisStore. No connection is made until first use.
        """
        if config.url:
            return cls.from_url(
                config.url,
                key_prefix=config.key_prefix,
                socket_timeout=config.socket_timeout,
            )

        client = redis.Redis(
            host=config.host,
            port=config.port,
            username=config.username,
            password=config.password,
            db=config.db,
            socket_timeout=config.socket_timeout,
        )
        return cls(client, key_prefix=config.key_prefix)

    @property
    def client(self) -> redis.Redis:
        """Get the underlying Redis client."""
        return self._redis

    async def get(self, key: str) -> bytes | None:
        """Retrieve the raw value stored under key."""
        return await self._redis.get(self._prefixed_key(key))

    async def set(self, key: str, value: bytes, ttl: float | None = None) -> None:
        """Store raw bytes with an optional expiry.

        Whole-second TTLs are sent as EX, fractional ones as PX
        milliseconds rounded up.

        Args:
            key: The key, without prefix.
            value: The bytes to store.
            ttl: Time-to-live in seconds. None means no expiration.
        """
        if ttl is None:
            await self._redis.set(self._prefixed_key(key), value)
        elif float(ttl).is_integer():
            await self._redis.set(self._prefixed_key(key), value, ex=int(ttl))
        else:
            px = math.ceil(ttl * 1000)
            await self._redis.set(self._prefixed_key(key), value, px=px)

    async def delete(self, key: str) -> int:
        """Delete a single key."""
        return int(await self._redis.delete(self._prefixed_key(key)))

    async def batch_delete(self, keys: list[str]) -> int:
        """Delete keys in one pipeline round trip.

        One DEL per key, so each reply says whether that key still
        existed. Replies that are errors count as zero.

        Args:
            keys: The keys to delete, without prefix.

        Returns:
            Number of keys removed.
        """
        if not keys:
            return 0

        async with self._redis.pipeline(transaction=False) as pipe:
            for key in keys:
                pipe.delete(self._prefixed_key(key))
            results = await pipe.execute(raise_on_error=False)

        deleted = 0
        for result in results:
            if isinstance(result, Exception):
                logger.debug("DEL failed inside pipeline: %s", result)
                continue
            deleted += int(result)
        return deleted

    async def scan(self, pattern: str, batch_size: int) -> AsyncIterator[list[str]]:
        """Lazily enumerate keys matching pattern using SCAN.

        Args:
            pattern: Redis glob pattern, without prefix.
            batch_size: Upper bound on keys per batch, also used as the
                SCAN COUNT hint.

        Yields:
            Non-empty batches of at most batch_size keys, prefix removed.
        """
        match = f"{self._match_prefix}{pattern}"
        cursor = 0

        while True:
            cursor, raw_keys = await self._redis.scan(cursor, match=match, count=batch_size)

            # COUNT is only a hint, so a reply may exceed batch_size.
            keys = list(dict.fromkeys(self._unprefixed_key(k) for k in raw_keys))
            for start in range(0, len(keys), batch_size):
                yield keys[start:start + batch_size]

            if cursor == 0:
                break

    async def flush(self) -> None:
        """Flush every database on the server, regardless of prefix."""
        await self._redis.flushall()

    async def ping(self) -> bool:
        """Ping the server."""
        return bool(await self._redis.ping())

    async def close(self) -> None:
        """Close the Redis connection. Further calls are no-ops."""
        if self._closed:
            return
        self._closed = True
        await self._redis.aclose()

    def _prefixed_key(self, key: str) -> str:
        return f"{self._key_prefix}{key}"

    def _unprefixed_key(self, key: bytes | str) -> str:
        if isinstance(key, bytes):
            key = key.decode()
        return key[len(self._key_prefix):] if self._key_prefix else key

    async def __aenter__(self) -> "RedisStore":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: type, exc_val: Exception, exc_tb: object) -> None:
        """Async context manager exit."""
        await self.close()
