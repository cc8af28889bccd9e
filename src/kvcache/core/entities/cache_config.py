"""Cache configuration entity."""

import os
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

ENV_PREFIX = "KVCACHE_"

# (variable suffix, field name, converter)
_ENV_FIELDS: tuple[tuple[str, str, Callable[[str], Any]], ...] = (
    ("REDIS_URL", "url", str),
    ("REDIS_HOST", "host", str),
    ("REDIS_PORT", "port", int),
    ("REDIS_USERNAME", "username", str),
    ("REDIS_PASSWORD", "password", str),
    ("REDIS_DB", "db", int),
    ("KEY_PREFIX", "key_prefix", str),
    ("BATCH_SIZE", "batch_size", int),
)


@dataclass
class CacheConfig:
    """Cache client configuration.

    Connection settings for the Redis store plus the tuning knobs of
    pattern deletion.

    Connection:
        If ``url`` is set it takes precedence over ``host``, ``port``,
        ``username``, ``password`` and ``db``.

    Pattern deletion:
        ``batch_size`` bounds the number of keys handed to one batch
        delete. ``max_in_flight_batches`` caps how many batch deletes may
        be outstanding at once; ``None`` leaves it bounded only by the
        scan rate.
    """

    url: str | None = None
    host: str = "localhost"
    port: int = 6379
    username: str | None = None
    password: str | None = None
    db: int = 0
    socket_timeout: float | None = None
    key_prefix: str = ""

    batch_size: int = 100
    max_in_flight_batches: int | None = None

    def __post_init__(self) -> None:
        """Validate numeric settings."""
        if self.batch_size < 1:
            raise ValueError(f"batch_size must be >= 1, got {self.batch_size}")
        if self.max_in_flight_batches is not None and self.max_in_flight_batches < 1:
            raise ValueError(
                "max_in_flight_batches must be None or >= 1, "
                f"got {self.max_in_flight_batches}"
            )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "CacheConfig":
        """Build a configuration from ``KVCACHE_*`` environment variables.

        Args:
            environ: Mapping to read from. Defaults to ``os.environ``.

        Returns:
            A new CacheConfig. Unset or empty variables keep their defaults.
        """
        env = os.environ if environ is None else environ
        kwargs: dict[str, Any] = {}

        for name, field_name, convert in _ENV_FIELDS:
            value = env.get(ENV_PREFIX + name)
            if value:
                kwargs[field_name] = convert(value)

        return cls(**kwargs)
