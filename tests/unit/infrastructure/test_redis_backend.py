"""Tests for RedisKeyValueStore."""

import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import ResponseError
from redis.exceptions import TimeoutError as RedisTimeoutError

from cacheaside import (
    CacheConfig,
    CacheService,
    DefaultKeyBuilder,
    JsonSerializer,
    StoreUnavailableError,
)
from cacheaside_redis import RedisKeyValueStore


@pytest.fixture
def client() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def redis_store(client: AsyncMock) -> RedisKeyValueStore:
    return RedisKeyValueStore(client)


class TestCommands:
    """Tests for command mapping."""

    async def test_get(self, redis_store: RedisKeyValueStore, client: AsyncMock) -> None:
        client.get.return_value = b'[{"name":"Widget"}]'

        assert await redis_store.get("products:") == b'[{"name":"Widget"}]'
        client.get.assert_awaited_once_with("products:")

    async def test_get_missing(self, redis_store: RedisKeyValueStore, client: AsyncMock) -> None:
        client.get.return_value = None

        assert await redis_store.get("products:") is None

    async def test_get_decoded_client(
        self, redis_store: RedisKeyValueStore, client: AsyncMock
    ) -> None:
        """Clients created with decode_responses=True still yield bytes."""
        client.get.return_value = "[]"

        assert await redis_store.get("products:") == b"[]"

    async def test_set_uses_setex(
        self, redis_store: RedisKeyValueStore, client: AsyncMock
    ) -> None:
        await redis_store.set("products:", b"[]", 600)

        client.setex.assert_awaited_once_with("products:", 600, b"[]")

    async def test_scan(self, redis_store: RedisKeyValueStore, client: AsyncMock) -> None:
        client.scan.return_value = (42, [b"products:/a", "products:/b"])

        cursor, keys = await redis_store.scan(0, "products*", 100)

        assert cursor == 42
        assert keys == ["products:/a", "products:/b"]
        client.scan.assert_awaited_once_with(0, match="products*", count=100)

    async def test_delete(self, redis_store: RedisKeyValueStore, client: AsyncMock) -> None:
        client.delete.return_value = 2

        assert await redis_store.delete("a", "b") == 2
        client.delete.assert_awaited_once_with("a", "b")

    async def test_delete_nothing(
        self, redis_store: RedisKeyValueStore, client: AsyncMock
    ) -> None:
        assert await redis_store.delete() == 0
        client.delete.assert_not_awaited()

    async def test_ttl(self, redis_store: RedisKeyValueStore, client: AsyncMock) -> None:
        client.ttl.return_value = 599

        assert await redis_store.ttl("products:") == 599

    async def test_ping(self, redis_store: RedisKeyValueStore, client: AsyncMock) -> None:
        client.ping.return_value = True

        assert await redis_store.ping() is True

    async def test_close(self, redis_store: RedisKeyValueStore, client: AsyncMock) -> None:
        async with redis_store:
            pass

        client.aclose.assert_awaited_once()

    def test_from_url(self) -> None:
        with patch("cacheaside_redis.backend.redis.from_url") as from_url:
            from_url.return_value = MagicMock()

            store = RedisKeyValueStore.from_url("redis://cache:6379/1", socket_timeout=0.2)

        from_url.assert_called_once_with(
            "redis://cache:6379/1",
            socket_timeout=0.2,
            socket_connect_timeout=0.2,
        )
        assert store.client is from_url.return_value


class TestErrors:
    """Tests for error translation."""

    @pytest.mark.parametrize(
        "error",
        [
            RedisConnectionError("Connection refused"),
            RedisTimeoutError("Timeout reading from socket"),
            ResponseError("WRONGTYPE"),
            ConnectionResetError(),
            asyncio.TimeoutError(),
            UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte"),
        ],
    )
    async def test_get_errors_become_store_unavailable(
        self, redis_store: RedisKeyValueStore, client: AsyncMock, error: Exception
    ) -> None:
        client.get.side_effect = error

        with pytest.raises(StoreUnavailableError) as exc_info:
            await redis_store.get("products:")

        assert exc_info.value.operation == "get"
        assert exc_info.value.__cause__ is error

    async def test_set_error(self, redis_store: RedisKeyValueStore, client: AsyncMock) -> None:
        client.setex.side_effect = RedisConnectionError("Connection refused")

        with pytest.raises(StoreUnavailableError):
            await redis_store.set("products:", b"[]", 60)

    async def test_scan_error(self, redis_store: RedisKeyValueStore, client: AsyncMock) -> None:
        client.scan.side_effect = RedisConnectionError("Connection refused")

        with pytest.raises(StoreUnavailableError):
            await redis_store.scan(0, "*", 100)

    async def test_ping_failure(self, redis_store: RedisKeyValueStore, client: AsyncMock) -> None:
        client.ping.side_effect = RedisConnectionError("Connection refused")

        assert await redis_store.ping() is False

    async def test_unrelated_errors_propagate(
        self, redis_store: RedisKeyValueStore, client: AsyncMock
    ) -> None:
        client.get.side_effect = KeyError("bug")

        with pytest.raises(KeyError):
            await redis_store.get("products:")


class TestWithCacheService:
    """Tests for the Redis store behind a CacheService."""

    @pytest.fixture
    def service(self, redis_store: RedisKeyValueStore) -> CacheService:
        return CacheService(
            store=redis_store,
            key_builder=DefaultKeyBuilder(),
            serializer=JsonSerializer(),
            config=CacheConfig(store_timeout=0.1),
        )

    async def test_redis_down_fails_open(self, service: CacheService, client: AsyncMock) -> None:
        client.get.side_effect = RedisConnectionError("Connection refused")
        client.setex.side_effect = RedisConnectionError("Connection refused")

        async def produce():
            return [{"name": "Widget", "price": 9.99}]

        result = await service.read_through("products", "", produce, ttl=600)

        assert result == [{"name": "Widget", "price": 9.99}]

    async def test_undecodable_value_fails_open(
        self, service: CacheService, client: AsyncMock
    ) -> None:
        client.get.side_effect = UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")
        client.setex.return_value = True

        async def produce():
            return {"name": "Widget"}

        lookup = await service.lookup("product", "/api/products/1", produce, ttl=300)

        assert lookup.hit is False
        assert lookup.value == {"name": "Widget"}
        client.setex.assert_awaited_once()

    async def test_hit_served_from_redis(self, service: CacheService, client: AsyncMock) -> None:
        client.get.return_value = b'[{"name":"Widget","price":9.99}]'
        produce = AsyncMock()

        lookup = await service.lookup("products", "", produce)

        assert lookup.hit is True
        assert lookup.value == [{"name": "Widget", "price": 9.99}]
        produce.assert_not_called()
        client.get.assert_awaited_once_with("products:")

    async def test_miss_written_with_setex(
        self, service: CacheService, client: AsyncMock
    ) -> None:
        client.get.return_value = None

        async def produce():
            return [1]

        await service.read_through("products", "", produce, ttl=600)

        client.setex.assert_awaited_once_with("products:", 600, b"[1]")

    async def test_invalidate_scans_and_deletes(
        self, service: CacheService, client: AsyncMock
    ) -> None:
        client.scan.side_effect = [
            (11, [b"products:/a", b"products_paginated:/a?page=1"]),
            (0, [b"products:/b"]),
        ]
        client.delete.side_effect = [2, 1]

        assert await service.invalidate("products") == 3
        assert client.scan.await_args_list[0].kwargs == {"match": "products*", "count": 100}

    async def test_invalidate_with_redis_down(
        self, service: CacheService, client: AsyncMock
    ) -> None:
        client.scan.side_effect = RedisConnectionError("Connection refused")

        assert await service.invalidate("products") == 0
