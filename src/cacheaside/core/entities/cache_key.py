"""Cache key value object."""

from dataclasses import dataclass

GLOB_SPECIAL_CHARS = frozenset("*?[]\\")

KEY_SEPARATOR = ":"


def escape_glob(text: str) -> str:
    """Escape glob metacharacters so ``text`` only matches itself.

    Args:
        text: Literal text to embed in a pattern.

    Returns:
        The text with ``*``, ``?``, ``[``, ``]`` and ``\\`` backslash-escaped.
    """
    return "".join(f"\\{char}" if char in GLOB_SPECIAL_CHARS else char for char in text)


@dataclass(frozen=True)
class CacheKey:
    """Immutable cache key value object.

    Splits a key into the resource prefix, which groups every view of
    one resource family for invalidation, and the request signature,
    which tells individual requests apart.

    The signature may contain the separator, the prefix and namespace
    may not, so a key string splits back into its parts in one way only.
    """

    prefix: str
    signature: str
    namespace: str | None = None

    def __post_init__(self) -> None:
        if KEY_SEPARATOR in self.prefix:
            raise ValueError(f"prefix must not contain {KEY_SEPARATOR!r}: {self.prefix!r}")
        if self.namespace and KEY_SEPARATOR in self.namespace:
            raise ValueError(
                f"namespace must not contain {KEY_SEPARATOR!r}: {self.namespace!r}"
            )

    def __str__(self) -> str:
        """Return the full cache key string.

        Returns:
            ``[namespace:]prefix:signature``.
        """
        parts = [self.prefix, self.signature]
        if self.namespace:
            parts.insert(0, self.namespace)
        return KEY_SEPARATOR.join(parts)

    @staticmethod
    def pattern_for(prefix: str, namespace: str | None = None) -> str:
        """Build the invalidation pattern covering a resource family.

        The pattern is a plain prefix glob, so ``"products"`` also
        covers ``"products_paginated"``.

        Args:
            prefix: The resource prefix to match.
            namespace: Optional key namespace.

        Returns:
            A glob pattern such as ``"products*"``.
        """
        pattern = f"{escape_glob(prefix)}*"
        if namespace:
            pattern = f"{escape_glob(namespace)}{KEY_SEPARATOR}{pattern}"
        return pattern
