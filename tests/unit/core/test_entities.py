"""Tests for core entities."""

from datetime import datetime, timedelta, timezone

import pytest

from cacheaside import CacheConfig, CachedItem, CacheEntry, CacheKey
from cacheaside.core.entities import escape_glob


class TestCacheEntry:
    """Tests for CacheEntry."""

    def test_create_entry(self) -> None:
        """Test creating a cache entry."""
        entry = CacheEntry.create(key="products:", payload=b"[]", ttl_seconds=600)

        assert entry.key == "products:"
        assert entry.payload == b"[]"
        assert entry.ttl_seconds == 600
        assert entry.size_bytes == 2
        assert entry.inserted_at.tzinfo is not None

    def test_expires_at(self) -> None:
        """Test expiry is computed from insertion time and TTL."""
        inserted = datetime(2024, 1, 1, tzinfo=timezone.utc)
        entry = CacheEntry(key="k", payload=b"1", ttl_seconds=60, inserted_at=inserted)

        assert entry.expires_at == inserted + timedelta(seconds=60)

    @pytest.mark.parametrize("ttl", [0, -5])
    def test_rejects_non_positive_ttl(self, ttl: int) -> None:
        """Test that a TTL must be positive."""
        with pytest.raises(ValueError):
            CacheEntry.create(key="k", payload=b"1", ttl_seconds=ttl)

    def test_entry_is_immutable(self) -> None:
        """Test that entries cannot be modified."""
        entry = CacheEntry.create(key="k", payload=b"1", ttl_seconds=60)

        with pytest.raises(AttributeError):
            entry.payload = b"2"  # type: ignore[misc]


class TestCachedItem:
    def test_to_dict(self) -> None:
        item = CachedItem(value=[{"name": "Widget"}], ttl=42, size_bytes=19)

        assert item.to_dict() == {"value": [{"name": "Widget"}], "ttl": 42, "size": 19}


class TestCacheKey:
    """Tests for CacheKey."""

    def test_str(self) -> None:
        key = CacheKey(prefix="products", signature="/api/products")
        assert str(key) == "products:/api/products"

    def test_str_with_namespace(self) -> None:
        key = CacheKey(prefix="products", signature="/api/products", namespace="shop")
        assert str(key) == "shop:products:/api/products"

    def test_empty_signature(self) -> None:
        assert str(CacheKey(prefix="products", signature="")) == "products:"

    def test_pattern_for_prefix(self) -> None:
        assert CacheKey.pattern_for("products") == "products*"
        assert CacheKey.pattern_for("products", namespace="shop") == "shop:products*"

    def test_pattern_escapes_glob_characters(self) -> None:
        assert CacheKey.pattern_for("a*b?[c]") == "a\\*b\\?\\[c\\]*"

    def test_escape_glob_leaves_plain_text(self) -> None:
        assert escape_glob("products_paginated") == "products_paginated"


class TestCacheConfig:
    """Tests for CacheConfig."""

    def test_defaults(self) -> None:
        config = CacheConfig()

        assert config.enabled is True
        assert config.default_ttl == 300
        assert config.namespace is None
        assert config.store_timeout == 0.5
        assert config.scan_count == 100

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"default_ttl": 0},
            {"store_timeout": 0},
            {"scan_count": -1},
        ],
    )
    def test_invalid_values(self, kwargs: dict) -> None:
        with pytest.raises(ValueError):
            CacheConfig(**kwargs)

    def test_from_env(self) -> None:
        config = CacheConfig.from_env(
            {
                "CACHE_ENABLED": "false",
                "CACHE_DEFAULT_TTL": "600",
                "CACHE_NAMESPACE": "shop",
                "CACHE_STORE_TIMEOUT": "0.25",
                "CACHE_SCAN_COUNT": "500",
            }
        )

        assert config.enabled is False
        assert config.default_ttl == 600
        assert config.namespace == "shop"
        assert config.store_timeout == 0.25
        assert config.scan_count == 500

    def test_from_empty_env_uses_defaults(self) -> None:
        assert CacheConfig.from_env({}) == CacheConfig()
