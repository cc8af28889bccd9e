"""In-memory store implementation."""

import asyncio
import fnmatch
import math
from collections.abc import AsyncIterator

from cachetools import TLRUCache  # type: ignore[import-untyped]

_MISSING = object()


def _time_to_use(key: str, value: tuple[bytes, float | None], now: float) -> float:
    """Expiry of an entry: its own TTL, or never."""
    ttl = value[1]
    return now + ttl if ttl else math.inf


class InMemoryStore:
    """In-memory key-value store with per-key TTL.

    Suitable for tests and single-process deployments. Uses cachetools'
    TLRUCache so every entry carries its own expiry, with LRU eviction
    once maxsize is reached.

    There is no server-side pattern matching, so ``scan`` filters a
    snapshot of the keys with ``fnmatch`` on the client side. Glob
    syntax follows fnmatch, which differs from Redis for negated
    character classes (``[!a]`` rather than ``[^a]``).
    """

    def __init__(self, maxsize: int = 10_000) -> None:
        """Initialize the in-memory store.

        Args:
            maxsize: Maximum number of keys held before LRU eviction.
        """
        self._maxsize = maxsize
        self._cache: TLRUCache[str, tuple[bytes, float | None]] = TLRUCache(
            maxsize=maxsize,
            ttu=_time_to_use,
        )
        self._closed = False

    async def get(self, key: str) -> bytes | None:
        """Retrieve the raw value stored under key.

        Args:
            key: The key to retrieve.

        Returns:
            The stored bytes, or None if missing or expired.
        """
        entry = self._cache.get(key)
        return entry[0] if entry is not None else None

    async def set(self, key: str, value: bytes, ttl: float | None = None) -> None:
        """Store raw bytes with an optional per-key TTL.

        Args:
            key: The key.
            value: The bytes to store.
            ttl: Time-to-live in seconds. None means no expiration.
        """
        self._cache[key] = (value, ttl)

    async def delete(self, key: str) -> int:
        """Delete a single key.

        Args:
            key: The key to delete.

        Returns:
            1 if the key existed, 0 otherwise.
        """
        return 0 if self._cache.pop(key, _MISSING) is _MISSING else 1

    async def batch_delete(self, keys: list[str]) -> int:
        """Delete a batch of keys.

        Args:
            keys: The keys to delete.

        Returns:
            Number of keys that existed and were removed.
        """
        deleted = 0
        for key in keys:
            if self._cache.pop(key, _MISSING) is not _MISSING:
                deleted += 1
        return deleted

    async def scan(self, pattern: str, batch_size: int) -> AsyncIterator[list[str]]:
        """Enumerate keys matching pattern in batches.

        Args:
            pattern: fnmatch-style glob pattern.
            batch_size: Upper bound on keys per batch.

        Yields:
            Non-empty batches of at most batch_size keys.
        """
        self._cache.expire()
        # Snapshot: the cache must not change size while it is iterated.
        snapshot = list(self._cache.keys())

        batch: list[str] = []
        for key in snapshot:
            if not fnmatch.fnmatchcase(key, pattern):
                continue
            batch.append(key)
            if len(batch) >= batch_size:
                yield batch
                batch = []
                await asyncio.sleep(0)

        if batch:
            yield batch

    async def flush(self) -> None:
        """Remove every key."""
        self._cache.clear()

    async def ping(self) -> bool:
        """Report whether the store is still open.

        Returns:
            False once ``close`` has been called.
        """
        return not self._closed

    async def close(self) -> None:
        """Mark the store closed. Stored keys are kept."""
        self._closed = True

    def __len__(self) -> int:
        """Return the number of live keys."""
        self._cache.expire()
        return len(self._cache)

    @property
    def maxsize(self) -> int:
        """Return the maximum number of keys."""
        return self._maxsize
