"""Cache configuration entity."""

import os
from collections.abc import Mapping
from dataclasses import dataclass


@dataclass
class CacheConfig:
    """Cache configuration.

    Provides the knobs shared by the entry store, the read-through
    interceptor and the invalidator.

    Attributes:
        enabled: When False, reads go straight to the producer and
            invalidation does nothing.
        default_ttl: TTL in seconds used when a caller does not pass one.
        namespace: Optional prefix put in front of every key, so several
            applications can share one store. CacheService requires its
            key builder to use the same namespace.
        store_timeout: Upper bound in seconds for a single store round-trip.
        scan_count: Batch size hint for incremental key scans.
    """

    enabled: bool = True
    default_ttl: int = 300
    namespace: str | None = None
    store_timeout: float = 0.5
    scan_count: int = 100

    def __post_init__(self) -> None:
        """Validate numeric settings."""
        if self.default_ttl <= 0:
            raise ValueError("default_ttl must be a positive number of seconds")
        if self.store_timeout <= 0:
            raise ValueError("store_timeout must be positive")
        if self.scan_count <= 0:
            raise ValueError("scan_count must be positive")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "CacheConfig":
        """Build a configuration from ``CACHE_*`` environment variables.

        Args:
            environ: Mapping to read from. Defaults to ``os.environ``.

        Returns:
            A new CacheConfig; unset variables keep their defaults.
        """
        env = os.environ if environ is None else environ
        defaults = cls()

        return cls(
            enabled=env.get("CACHE_ENABLED", "true").lower() in ("1", "true", "yes"),
            default_ttl=int(env.get("CACHE_DEFAULT_TTL", defaults.default_ttl)),
            namespace=env.get("CACHE_NAMESPACE") or None,
            store_timeout=float(
                env.get("CACHE_STORE_TIMEOUT", defaults.store_timeout)
            ),
            scan_count=int(env.get("CACHE_SCAN_COUNT", defaults.scan_count)),
        )
