"""Exceptions raised by kvcache."""


class CacheError(Exception):
    """Base class for kvcache errors."""

    pass


class SerializationError(CacheError):
    """Raised when serialization or deserialization fails."""

    pass


class ScanError(CacheError):
    """Raised when a keyspace scan fails during pattern deletion.

    The keyspace was not fully enumerated, so no deletion count can be
    reported. The store error is available as ``__cause__``.
    """

    def __init__(self, pattern: str, message: str | None = None) -> None:
        self.pattern = pattern
        super().__init__(message or f"Scan failed for pattern {pattern!r}")
