"""Cache entry entities."""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any


@dataclass(frozen=True)
class CacheEntry:
    """Immutable record of a response written to the store.

    A later write to the same key replaces the entry in the store;
    entries are never updated in place.
    """

    key: str
    payload: bytes
    ttl_seconds: int
    inserted_at: datetime

    def __post_init__(self) -> None:
        if self.ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be greater than zero")

    @property
    def expires_at(self) -> datetime:
        """The datetime when this entry expires."""
        return self.inserted_at + timedelta(seconds=self.ttl_seconds)

    @property
    def size_bytes(self) -> int:
        """Size of the serialized payload in bytes."""
        return len(self.payload)

    @classmethod
    def create(cls, key: str, payload: bytes, ttl_seconds: int) -> "CacheEntry":
        """Factory method to create a new cache entry stamped with the current time.

        Args:
            key: The cache key.
            payload: The serialized response.
            ttl_seconds: Time-to-live in seconds.

        Returns:
            A new CacheEntry instance.
        """
        return cls(
            key=key,
            payload=payload,
            ttl_seconds=ttl_seconds,
            inserted_at=datetime.now(timezone.utc),
        )


@dataclass(frozen=True)
class CachedItem:
    """Diagnostic view of a stored key.

    Attributes:
        value: The deserialized payload, or None if it could not be decoded.
        ttl: Remaining seconds before expiry, or None if the key never expires.
        size_bytes: Size of the raw stored payload.
    """

    value: Any
    ttl: int | None
    size_bytes: int

    def to_dict(self) -> dict[str, Any]:
        return {"value": self.value, "ttl": self.ttl, "size": self.size_bytes}
