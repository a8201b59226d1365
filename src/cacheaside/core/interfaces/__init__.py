"""Core interfaces (Protocol classes) for cacheaside."""

from cacheaside.core.interfaces.cache_backend import IKeyValueStore
from cacheaside.core.interfaces.invalidator import IInvalidator
from cacheaside.core.interfaces.key_builder import IKeyBuilder
from cacheaside.core.interfaces.serializer import ISerializer

__all__ = [
    "IKeyValueStore",
    "IKeyBuilder",
    "ISerializer",
    "IInvalidator",
]
