"""Core services for kvcache."""

from kvcache.core.services.cache_client import CacheClient
from kvcache.core.services.pattern_delete import DEFAULT_BATCH_SIZE, PatternDeleteEngine

__all__ = [
    "CacheClient",
    "PatternDeleteEngine",
    "DEFAULT_BATCH_SIZE",
]
