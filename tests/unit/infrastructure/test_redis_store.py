"""Tests for RedisStore against fakeredis."""

import pytest
from fakeredis.aioredis import FakeRedis

from kvcache import CacheConfig, RedisStore


async def collect(store: RedisStore, pattern: str, batch_size: int) -> list[list[str]]:
    return [batch async for batch in store.scan(pattern, batch_size)]


class TestRedisStore:
    """Tests for RedisStore."""

    async def test_set_and_get(self, redis_store: RedisStore) -> None:
        """Test basic set and get operations."""
        await redis_store.set("key1", b"value1")
        assert await redis_store.get("key1") == b"value1"

    async def test_set_with_ttl(self, redis_store: RedisStore, fake_redis: FakeRedis) -> None:
        """Test TTL is applied as EX seconds."""
        await redis_store.set("key1", b"v", ttl=30)
        await redis_store.set("key2", b"v")

        assert 0 < await fake_redis.ttl("key1") <= 30
        assert await fake_redis.ttl("key2") == -1

    async def test_fractional_ttl_uses_milliseconds(
        self, redis_store: RedisStore, fake_redis: FakeRedis
    ) -> None:
        """Test a fractional TTL is applied as PX rather than rejected."""
        await redis_store.set("key1", b"v", ttl=0.5)
        await redis_store.set("key2", b"v", ttl=1.5)

        assert 0 < await fake_redis.pttl("key1") <= 500
        assert 1000 < await fake_redis.pttl("key2") <= 1500
        assert await redis_store.get("key2") == b"v"

    async def test_delete(self, redis_store: RedisStore) -> None:
        """Test delete returns how many keys were removed."""
        await redis_store.set("key1", b"v")

        assert await redis_store.delete("key1") == 1
        assert await redis_store.delete("key1") == 0

    async def test_batch_delete(self, redis_store: RedisStore) -> None:
        """Test batch delete only counts keys that existed."""
        await redis_store.set("a", b"1")
        await redis_store.set("b", b"2")

        assert await redis_store.batch_delete(["a", "b", "gone"]) == 2
        assert await redis_store.batch_delete([]) == 0
        assert await redis_store.get("a") is None

    async def test_scan_yields_bounded_batches(self, redis_store: RedisStore) -> None:
        """Test every batch is non-empty and within batch size."""
        for i in range(45):
            await redis_store.set(f"user:{i}", b"x")
        await redis_store.set("post:1", b"x")

        batches = await collect(redis_store, "user:*", 10)
        keys = [key for batch in batches for key in batch]

        assert all(0 < len(batch) <= 10 for batch in batches)
        assert sorted(keys) == sorted(f"user:{i}" for i in range(45))

    async def test_scan_returns_str_keys(self, redis_store: RedisStore) -> None:
        """Test byte replies are decoded to str."""
        await redis_store.set("user:1", b"x")

        assert await collect(redis_store, "user:*", 10) == [["user:1"]]

    async def test_flush(self, redis_store: RedisStore) -> None:
        """Test flush removes all keys."""
        await redis_store.set("key1", b"v")
        await redis_store.flush()
        assert await redis_store.get("key1") is None

    async def test_ping(self, redis_store: RedisStore) -> None:
        assert await redis_store.ping() is True

    async def test_close_twice(self, redis_store: RedisStore) -> None:
        """Test closing is idempotent."""
        await redis_store.close()
        await redis_store.close()


class TestKeyPrefix:
    """Tests for prefixed keys."""

    @pytest.fixture
    def store(self, fake_redis: FakeRedis) -> RedisStore:
        return RedisStore(fake_redis, key_prefix="app")

    async def test_keys_are_prefixed(self, store: RedisStore, fake_redis: FakeRedis) -> None:
        """Test the stored key carries the prefix."""
        await store.set("user:1", b"x")

        assert await fake_redis.get("app:user:1") == b"x"
        assert await store.get("user:1") == b"x"

    async def test_scan_strips_prefix(self, store: RedisStore, fake_redis: FakeRedis) -> None:
        """Test scan matches within the prefix and reports bare keys."""
        await store.set("user:1", b"x")
        await fake_redis.set("user:2", b"unprefixed")

        batches = await collect(store, "user:*", 10)

        assert batches == [["user:1"]]
        assert await store.batch_delete(batches[0]) == 1
        assert await fake_redis.get("user:2") == b"unprefixed"


class TestConstruction:
    """Tests for building stores from configuration."""

    async def test_from_config_with_fields(self) -> None:
        """Test connection fields reach the client."""
        store = RedisStore.from_config(
            CacheConfig(host="cache.internal", port=6380, db=2, password="s3cret")
        )
        kwargs = store.client.connection_pool.connection_kwargs

        assert kwargs["host"] == "cache.internal"
        assert kwargs["port"] == 6380
        assert kwargs["db"] == 2
        assert kwargs["password"] == "s3cret"
        await store.close()

    async def test_from_config_with_url(self) -> None:
        """Test the URL wins over individual fields."""
        store = RedisStore.from_config(
            CacheConfig(url="redis://other-host:6390/3", host="ignored")
        )
        kwargs = store.client.connection_pool.connection_kwargs

        assert kwargs["host"] == "other-host"
        assert kwargs["port"] == 6390
        assert kwargs["db"] == 3
        await store.close()


class TestGlobCharactersInPrefix:
    """Tests for prefixes that contain glob metacharacters."""

    @pytest.mark.parametrize("prefix", ["tenant[1]", "a*b", "what?", "back\\slash"])
    async def test_scan_treats_prefix_literally(
        self, fake_redis: FakeRedis, prefix: str
    ) -> None:
        """Test the prefix is matched literally while the pattern stays a glob."""
        store = RedisStore(fake_redis, key_prefix=prefix)
        await store.set("user:1", b"x")
        await store.set("post:1", b"x")

        batches = await collect(store, "user:*", 10)

        assert batches == [["user:1"]]
        assert await store.batch_delete(batches[0]) == 1
        assert await store.get("user:1") is None
        assert await store.get("post:1") == b"x"

    async def test_prefix_does_not_match_lookalikes(self, fake_redis: FakeRedis) -> None:
        """Test 'tenant[1]' does not also scan keys of tenant '1'."""
        store = RedisStore(fake_redis, key_prefix="tenant[1]")
        await fake_redis.set("tenant1:user:1", b"other")
        await store.set("user:1", b"x")

        assert await collect(store, "user:*", 10) == [["user:1"]]
