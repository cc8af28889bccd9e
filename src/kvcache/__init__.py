"""kvcache - Best-effort async cache client for Redis.

A small cache layer over a key-value store with JSON value
serialization, soft failure handling and concurrent pattern deletion.

Example:
    from kvcache import CacheConfig, create_cache_client

    cache = create_cache_client(CacheConfig(url="redis://localhost:6379"))

    await cache.set("user:1", {"id": 1}, ttl=300)
    user = await cache.get("user:1")

    # Delete every user entry; returns the number of keys removed
    deleted = await cache.delete_pattern("user:*")

    await cache.disconnect()

Failures of get/set/delete/clear are logged and absorbed. Pass any
object with debug/info/warning/error methods as ``logger`` to route
those messages; the ``kvcache`` stdlib logger is used otherwise.
"""

from kvcache.core.entities import CacheConfig, DeletionTally, PatternDeleteState
from kvcache.core.exceptions import CacheError, ScanError, SerializationError
from kvcache.core.interfaces import ICacheClient, IKeyValueStore, ILogger, ISerializer
from kvcache.core.services import DEFAULT_BATCH_SIZE, CacheClient, PatternDeleteEngine
from kvcache.factory import create_cache_client
from kvcache.infrastructure import InMemoryStore, JsonSerializer, RedisStore

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Core entities
    "CacheConfig",
    "DeletionTally",
    "PatternDeleteState",
    # Exceptions
    "CacheError",
    "ScanError",
    "SerializationError",
    # Core interfaces
    "ICacheClient",
    "IKeyValueStore",
    "ISerializer",
    "ILogger",
    # Core services
    "CacheClient",
    "PatternDeleteEngine",
    "DEFAULT_BATCH_SIZE",
    # Infrastructure implementations
    "RedisStore",
    "InMemoryStore",
    "JsonSerializer",
    # Factory
    "create_cache_client",
]
