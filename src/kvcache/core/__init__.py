"""Core domain layer for kvcache."""

from kvcache.core.entities import CacheConfig, DeletionTally, PatternDeleteState
from kvcache.core.exceptions import CacheError, ScanError, SerializationError
from kvcache.core.interfaces import ICacheClient, IKeyValueStore, ILogger, ISerializer
from kvcache.core.services import CacheClient, PatternDeleteEngine

__all__ = [
    # Entities
    "CacheConfig",
    "DeletionTally",
    "PatternDeleteState",
    # Exceptions
    "CacheError",
    "ScanError",
    "SerializationError",
    # Interfaces
    "ICacheClient",
    "IKeyValueStore",
    "ISerializer",
    "ILogger",
    # Services
    "CacheClient",
    "PatternDeleteEngine",
]
