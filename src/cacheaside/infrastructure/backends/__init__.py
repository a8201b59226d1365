"""Key-value store implementations."""

from cacheaside.infrastructure.backends.memory import InMemoryKeyValueStore

__all__ = ["InMemoryKeyValueStore"]
