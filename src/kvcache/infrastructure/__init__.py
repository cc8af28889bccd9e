"""Infrastructure layer implementations for kvcache."""

from kvcache.infrastructure.backends import InMemoryStore, RedisStore
from kvcache.infrastructure.serializers import JsonSerializer

__all__ = [
    "InMemoryStore",
    "RedisStore",
    "JsonSerializer",
]
