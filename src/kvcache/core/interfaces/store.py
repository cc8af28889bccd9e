"""Key-value store interface."""

from collections.abc import AsyncIterator
from typing import Protocol, runtime_checkable


@runtime_checkable
class IKeyValueStore(Protocol):
    """Contract for raw key-value store access.

    Stores deal in bytes and may raise on any failure; error
    containment and serialization live in the cache client.
    """

    async def get(self, key: str) -> bytes | None:
        """Retrieve the raw value stored under key.

        Args:
            key: The key to retrieve.

        Returns:
            The stored bytes, or None if missing or expired.
        """
        ...

    async def set(self, key: str, value: bytes, ttl: float | None = None) -> None:
        """Store raw bytes under key.

        Args:
            key: The key.
            value: The bytes to store.
            ttl: Time-to-live in seconds, possibly fractional. None means
                no expiration.
        """
        ...

    async def delete(self, key: str) -> int:
        """Delete a single key.

        Args:
            key: The key to delete.

        Returns:
            Number of keys removed (0 or 1).
        """
        ...

    async def batch_delete(self, keys: list[str]) -> int:
        """Delete a batch of keys.

        Args:
            keys: The keys to delete.

        Returns:
            How many of the keys were actually removed. Keys that no
            longer exist (e.g. expired since they were scanned) do not
            count.
        """
        ...

    def scan(self, pattern: str, batch_size: int) -> AsyncIterator[list[str]]:
        """Lazily enumerate keys matching a glob pattern.

        Each yielded batch is non-empty and holds at most ``batch_size``
        keys. The first batch is available before the scan completes.
        Under concurrent mutation a key may be reported more than once
        or missed, as with the store's native iteration.

        Args:
            pattern: Store-native glob pattern, e.g. ``user:*``.
            batch_size: Upper bound on keys per batch.

        Returns:
            An async iterator of key batches.
        """
        ...

    async def flush(self) -> None:
        """Remove every key in the store."""
        ...

    async def ping(self) -> bool:
        """Check connectivity to the store."""
        ...

    async def close(self) -> None:
        """Release the connection. Safe to call more than once."""
        ...
