"""Prefix-based cache invalidation."""

import logging
from collections.abc import Iterable

from cacheaside.core.entities.cache_config import CacheConfig
from cacheaside.core.exceptions import StoreUnavailableError
from cacheaside.core.interfaces.key_builder import IKeyBuilder
from cacheaside.core.services.entry_store import CacheEntryStore

logger = logging.getLogger(__name__)


class PrefixInvalidator:
    """Deletes every cached view of a resource family after a write.

    Called once the mutating operation has succeeded. A store failure
    is logged and swallowed: the write already happened, and stale
    entries still expire through their TTL.
    """

    def __init__(
        self,
        entry_store: CacheEntryStore,
        key_builder: IKeyBuilder,
        config: CacheConfig | None = None,
    ) -> None:
        self._entry_store = entry_store
        self._key_builder = key_builder
        self._config = config or CacheConfig()

    async def invalidate(self, prefix: str) -> int:
        """Invalidate every entry under a resource prefix.

        Args:
            prefix: The resource prefix, e.g. ``"products"``. Also clears
                families sharing it, such as ``"products_paginated"``.

        Returns:
            Number of entries removed, 0 if the store was unreachable.
        """
        if not self._config.enabled:
            return 0

        pattern = self._key_builder.pattern_for(prefix)
        try:
            removed = await self._entry_store.delete_matching(pattern)
        except StoreUnavailableError as e:
            logger.warning("Invalidation of %s skipped: %s", pattern, e)
            return 0

        if removed:
            logger.info("Invalidated %d cache keys matching %s", removed, pattern)
        else:
            logger.debug("No cache keys to invalidate for %s", pattern)
        return removed

    async def invalidate_many(self, prefixes: Iterable[str]) -> int:
        """Invalidate several resource prefixes.

        Prefixes already covered by a shorter one in the same call are
        skipped, so each key family is scanned once.

        Args:
            prefixes: Resource prefixes to invalidate.

        Returns:
            Total number of entries removed.
        """
        count = 0
        for prefix in _covering_prefixes(prefixes):
            count += await self.invalidate(prefix)
        return count


def _covering_prefixes(prefixes: Iterable[str]) -> list[str]:
    kept: list[str] = []
    for prefix in sorted(set(prefixes)):
        if not any(prefix.startswith(other) for other in kept):
            kept.append(prefix)
    return kept
