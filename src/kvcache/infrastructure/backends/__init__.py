"""Store implementations."""

from kvcache.infrastructure.backends.memory import InMemoryStore
from kvcache.infrastructure.backends.redis import RedisStore

__all__ = [
    "InMemoryStore",
    "RedisStore",
]
