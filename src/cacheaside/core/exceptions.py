"""Exceptions raised by the cache layer."""


class CacheError(Exception):
    """Base class for cache layer errors."""

    pass


class StoreUnavailableError(CacheError):
    """Raised when the key-value store cannot complete an operation.

    Covers connection failures, protocol errors and timeouts alike.
    Callers treat it as transient: reads fall back to the producer,
    writes and invalidations are skipped.
    """

    def __init__(self, operation: str, reason: str | None = None) -> None:
        self.operation = operation
        self.reason = reason
        message = f"Key-value store unavailable during {operation}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class SerializationError(CacheError):
    """Raised when serialization or deserialization fails."""

    pass
