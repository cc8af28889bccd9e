"""Domain entities for kvcache."""

from kvcache.core.entities.cache_config import CacheConfig
from kvcache.core.entities.deletion_tally import DeletionTally, PatternDeleteState

__all__ = [
    "CacheConfig",
    "DeletionTally",
    "PatternDeleteState",
]
