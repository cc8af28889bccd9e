"""Serializer implementations."""

from kvcache.infrastructure.serializers.json import JsonSerializer

__all__ = ["JsonSerializer"]
