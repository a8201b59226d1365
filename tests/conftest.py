"""Pytest configuration for cacheaside tests."""

import asyncio

import pytest

from cacheaside import (
    CacheConfig,
    CacheService,
    DefaultKeyBuilder,
    InMemoryKeyValueStore,
    JsonSerializer,
    StoreUnavailableError,
)


class FakeClock:
    """Manually advanced clock for TTL tests."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FlakyStore(InMemoryKeyValueStore):
    """In-memory store whose operations can be switched to fail or hang."""

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.failing: set[str] = set()
        self.hanging: set[str] = set()
        self.calls: list[str] = []

    async def _check(self, operation: str) -> None:
        self.calls.append(operation)
        if operation in self.failing:
            raise StoreUnavailableError(operation, "connection refused")
        if operation in self.hanging:
            await asyncio.sleep(10)

    async def get(self, key):
        await self._check("get")
        return await super().get(key)

    async def set(self, key, value, ttl_seconds):
        await self._check("set")
        await super().set(key, value, ttl_seconds)

    async def scan(self, cursor, pattern, count):
        await self._check("scan")
        return await super().scan(cursor, pattern, count)

    async def delete(self, *keys):
        await self._check("delete")
        return await super().delete(*keys)

    async def ttl(self, key):
        await self._check("ttl")
        return await super().ttl(key)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store(clock: FakeClock) -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore(maxsize=100, timer=clock)


@pytest.fixture
def flaky_store() -> FlakyStore:
    return FlakyStore(maxsize=100)


@pytest.fixture
def config() -> CacheConfig:
    return CacheConfig(default_ttl=300, store_timeout=0.05)


@pytest.fixture
def cache_service(store: InMemoryKeyValueStore, config: CacheConfig) -> CacheService:
    """Create a cache service over the in-memory store."""
    return CacheService(
        store=store,
        key_builder=DefaultKeyBuilder(),
        serializer=JsonSerializer(),
        config=config,
    )


@pytest.fixture
def flaky_service(flaky_store: FlakyStore, config: CacheConfig) -> CacheService:
    """Create a cache service whose store can be made to fail."""
    return CacheService(
        store=flaky_store,
        key_builder=DefaultKeyBuilder(),
        serializer=JsonSerializer(),
        config=config,
    )
