"""Serializer implementations."""

from cacheaside.infrastructure.serializers.json import JsonSerializer

__all__ = ["JsonSerializer"]
