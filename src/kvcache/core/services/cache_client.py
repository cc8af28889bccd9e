"""Cache client - main entry point for cache operations."""

from datetime import timedelta
from typing import Any

from kvcache.core.entities.cache_config import CacheConfig
from kvcache.core.entities.deletion_tally import DeletionTally
from kvcache.core.interfaces.logger import ILogger
from kvcache.core.interfaces.serializer import ISerializer
from kvcache.core.interfaces.store import IKeyValueStore
from kvcache.core.services.pattern_delete import PatternDeleteEngine
from kvcache.utils.log import SafeLogger


class CacheClient:
    """Best-effort cache over a key-value store.

    Composes a store, a serializer and a logger. Store and
    serialization failures are logged and absorbed, so the cache can
    never take the application down with it: a failed read is a miss,
    a failed write is a no-op. The one exception is ``delete_pattern``,
    which raises ScanError when the keyspace could not be enumerated.
    """

    def __init__(
        self,
        store: IKeyValueStore,
        serializer: ISerializer,
        config: CacheConfig | None = None,
        logger: ILogger | None = None,
    ) -> None:
        """Initialize the cache client.

        Args:
            store: The store holding the cached bytes.
            serializer: The serializer for encoding/decoding values.
            config: Optional configuration. Uses defaults if not provided.
            logger: Optional logger. Uses the library logger if not provided.
        """
        self._store = store
        self._serializer = serializer
        self._config = config or CacheConfig()
        self._logger = SafeLogger(logger)
        self._engine = PatternDeleteEngine(
            store,
            logger=self._logger,
            batch_size=self._config.batch_size,
            max_in_flight=self._config.max_in_flight_batches,
        )
        self._closed = False

    @property
    def config(self) -> CacheConfig:
        """Get the cache configuration."""
        return self._config

    @property
    def store(self) -> IKeyValueStore:
        """Get the underlying store."""
        return self._store

    @property
    def closed(self) -> bool:
        """Whether ``disconnect`` has been called."""
        return self._closed

    async def connect(self) -> bool:
        """Check that the store is reachable.

        Returns:
            True if the store answered, False otherwise.
        """
        try:
            await self._store.ping()
        except Exception as e:
            self._logger.error("Cache store connection error: %s", e)
            return False

        self._logger.info("Cache store connected")
        return True

    async def get(self, key: str) -> Any | None:
        """Retrieve a value from the cache.

        Args:
            key: The cache key.

        Returns:
            The cached value, or None if missing, unreadable, or the
            store is unavailable.
        """
        try:
            data = await self._store.get(key)
            if not data:
                return None
            return self._serializer.deserialize(data)
        except Exception as e:
            self._logger.error("Error getting key %s from cache: %s", key, e)
            return None

    async def set(
        self,
        key: str,
        value: Any,
        ttl: float | timedelta | None = None,
    ) -> None:
        """Store a value in the cache.

        Args:
            key: The cache key.
            value: A JSON-compatible value.
            ttl: Optional time-to-live in seconds or as a timedelta.
                Fractions of a second are kept. Omitted or zero means
                no expiration.
        """
        try:
            serialized = self._serializer.serialize(value)
            await self._store.set(key, serialized, _ttl_seconds(ttl))
        except Exception as e:
            self._logger.error("Error setting key %s in cache: %s", key, e)

    async def delete(self, key: str) -> None:
        """Delete a value from the cache.

        Args:
            key: The cache key.
        """
        try:
            await self._store.delete(key)
        except Exception as e:
            self._logger.error("Error deleting key %s from cache: %s", key, e)

    async def delete_pattern(self, pattern: str, batch_size: int | None = None) -> int:
        """Delete all keys matching a glob pattern.

        Args:
            pattern: The pattern to match (e.g. ``user:*``).
            batch_size: Optional per-call batch size.

        Returns:
            The number of keys deleted.

        Raises:
            ScanError: If the keyspace could not be fully scanned.
        """
        return await self._engine.delete_pattern(pattern, batch_size)

    async def delete_pattern_tally(
        self,
        pattern: str,
        batch_size: int | None = None,
    ) -> DeletionTally:
        """Like ``delete_pattern`` but return the full DeletionTally."""
        return await self._engine.run(pattern, batch_size)

    async def clear(self) -> None:
        """Clear the entire store.

        This flushes every key in the store, not only keys written
        through this client. Intended for controlled contexts such as
        test teardown.
        """
        try:
            await self._store.flush()
        except Exception as e:
            self._logger.error("Error clearing cache: %s", e)

    async def disconnect(self) -> None:
        """Close the cache connection.

        Waits for batch deletes still running on behalf of cancelled
        ``delete_pattern`` calls before closing. Calling it again is a
        no-op.
        """
        if self._closed:
            return
        self._closed = True

        await self._engine.join()
        try:
            await self._store.close()
        except Exception as e:
            self._logger.error("Error disconnecting cache store: %s", e)

    async def __aenter__(self) -> "CacheClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: type, exc_val: Exception, exc_tb: object) -> None:
        """Async context manager exit."""
        await self.disconnect()


def _ttl_seconds(ttl: float | timedelta | None) -> float | None:
    """Normalize a TTL to seconds, None meaning no expiration."""
    if isinstance(ttl, timedelta):
        ttl = ttl.total_seconds()
    if not ttl:
        return None
    return ttl
