"""Cache invalidator interface."""

from collections.abc import Iterable
from typing import Protocol


class IInvalidator(Protocol):
    """Contract for clearing cached responses after a write.

    Invalidators are called after the mutating operation has succeeded
    and must not raise on store failures.
    """

    async def invalidate(self, prefix: str) -> int:
        """Invalidate every entry under a resource prefix.

        Args:
            prefix: The resource prefix whose entries became stale.

        Returns:
            Number of entries removed.
        """
        ...

    async def invalidate_many(self, prefixes: Iterable[str]) -> int:
        """Invalidate several resource prefixes.

        Returns:
            Total number of entries removed.
        """
        ...
