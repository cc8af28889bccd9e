"""Cache client interface."""

from datetime import timedelta
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ICacheClient(Protocol):
    """Contract for the public cache client.

    Every operation except ``delete_pattern`` is best-effort: failures
    are logged and a neutral result is returned, so callers must always
    be prepared for a cache miss.
    """

    async def get(self, key: str) -> Any | None:
        """Retrieve a value from the cache.

        Args:
            key: The cache key.

        Returns:
            The cached value, or None if missing or unreadable.
        """
        ...

    async def set(
        self,
        key: str,
        value: Any,
        ttl: float | timedelta | None = None,
    ) -> None:
        """Store a value in the cache.

        Args:
            key: The cache key.
            value: A JSON-compatible value.
            ttl: Optional time-to-live. Omitted means no expiration.
        """
        ...

    async def delete(self, key: str) -> None:
        """Delete a value from the cache."""
        ...

    async def delete_pattern(self, pattern: str) -> int:
        """Delete all keys matching a glob pattern.

        Args:
            pattern: The pattern to match (e.g. ``user:*``).

        Returns:
            The number of keys deleted.

        Raises:
            ScanError: If the keyspace could not be fully scanned.
        """
        ...

    async def clear(self) -> None:
        """Clear the entire store."""
        ...

    async def disconnect(self) -> None:
        """Close the cache connection."""
        ...
