"""Core interfaces (Protocol classes) for kvcache."""

from kvcache.core.interfaces.cache_client import ICacheClient
from kvcache.core.interfaces.logger import ILogger
from kvcache.core.interfaces.serializer import ISerializer
from kvcache.core.interfaces.store import IKeyValueStore

__all__ = [
    "ICacheClient",
    "IKeyValueStore",
    "ISerializer",
    "ILogger",
]
