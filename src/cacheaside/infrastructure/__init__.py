"""Infrastructure layer implementations for cacheaside."""

from cacheaside.infrastructure.backends import InMemoryKeyValueStore
from cacheaside.infrastructure.key_builders import DefaultKeyBuilder
from cacheaside.infrastructure.serializers import JsonSerializer

__all__ = [
    "InMemoryKeyValueStore",
    "DefaultKeyBuilder",
    "JsonSerializer",
]
