"""Hashing and normalization utilities for cache key generation."""

import hashlib
from urllib.parse import parse_qsl, urlencode


def hash_value(value: str) -> str:
    """Create a deterministic hash of a string.

    Args:
        value: The string to hash.

    Returns:
        A hexadecimal hash string (first 16 chars of SHA-256).
    """
    return hashlib.sha256(value.encode()).hexdigest()[:16]


def normalize_signature(signature: str) -> str:
    """Normalize a ``path?query`` request signature for consistent keys.

    Query parameters are ordered by name so that ``?b=2&a=1`` and
    ``?a=1&b=2`` produce the same signature. The sort is stable: values
    of a repeated parameter keep their original relative order, since
    that order can change the response. Percent-encoding is normalized
    and blank values are kept.

    Args:
        signature: The raw request signature.

    Returns:
        The normalized signature. Signatures without a query string are
        returned unchanged.
    """
    path, separator, query = signature.partition("?")
    if not separator:
        return signature

    pairs = parse_qsl(query, keep_blank_values=True)
    if not pairs:
        return path

    ordered = sorted(pairs, key=lambda pair: pair[0])
    return f"{path}?{urlencode(ordered)}"
