"""Factory for cache clients."""

from kvcache.core.entities.cache_config import CacheConfig
from kvcache.core.interfaces.logger import ILogger
from kvcache.core.interfaces.serializer import ISerializer
from kvcache.core.interfaces.store import IKeyValueStore
from kvcache.core.services.cache_client import CacheClient
from kvcache.infrastructure.backends.redis import RedisStore
from kvcache.infrastructure.serializers.json import JsonSerializer


def create_cache_client(
    config: CacheConfig | None = None,
    *,
    logger: ILogger | None = None,
    store: IKeyValueStore | None = None,
    serializer: ISerializer | None = None,
) -> CacheClient:
    """Create a new cache client.

    Args:
        config: Connection and tuning options. Read from ``KVCACHE_*``
            environment variables if not provided.
        logger: Optional logger. Uses the ``kvcache`` logger if not provided.
        store: Optional store. A RedisStore built from config if not provided.
        serializer: Optional serializer. JsonSerializer if not provided.

    Returns:
        A CacheClient. The Redis connection is opened lazily on first use.
    """
    config = config or CacheConfig.from_env()
    return CacheClient(
        store=store if store is not None else RedisStore.from_config(config),
        serializer=serializer if serializer is not None else JsonSerializer(),
        config=config,
        logger=logger,
    )
