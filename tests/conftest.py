"""Pytest configuration for kvcache tests."""

from unittest.mock import MagicMock

import pytest
from fakeredis import FakeServer
from fakeredis.aioredis import FakeRedis

from kvcache import CacheClient, CacheConfig, InMemoryStore, JsonSerializer, RedisStore


@pytest.fixture
def mock_logger() -> MagicMock:
    """A logger recording every call."""
    return MagicMock(spec=["debug", "info", "warning", "error"])


@pytest.fixture
async def fake_redis():
    """A clean fakeredis client for each test."""
    client = FakeRedis(server=FakeServer())
    yield client
    await client.aclose()


@pytest.fixture
def redis_store(fake_redis: FakeRedis) -> RedisStore:
    """A RedisStore talking to fakeredis."""
    return RedisStore(fake_redis)


@pytest.fixture
def memory_store() -> InMemoryStore:
    """An empty in-memory store."""
    return InMemoryStore(maxsize=1000)


@pytest.fixture
def cache(redis_store: RedisStore, mock_logger: MagicMock) -> CacheClient:
    """A cache client backed by fakeredis."""
    return CacheClient(
        store=redis_store,
        serializer=JsonSerializer(),
        config=CacheConfig(),
        logger=mock_logger,
    )
