"""Logging helpers."""

import logging
from typing import Any

from kvcache.core.interfaces.logger import ILogger

DEFAULT_LOGGER_NAME = "kvcache"


def get_default_logger() -> logging.Logger:
    """Return the library logger used when none is injected."""
    return logging.getLogger(DEFAULT_LOGGER_NAME)


class SafeLogger:
    """Wraps an injected logger so that logging never raises.

    Cache operations log on their failure paths; a broken logger must
    not turn a soft failure into a hard one.
    """

    def __init__(self, logger: ILogger | None = None) -> None:
        self._logger: ILogger = logger if logger is not None else get_default_logger()

    @property
    def wrapped(self) -> ILogger:
        return self._logger

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._emit("debug", msg, args, kwargs)

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._emit("info", msg, args, kwargs)

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._emit("warning", msg, args, kwargs)

    warn = warning

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._emit("error", msg, args, kwargs)

    def _emit(
        self,
        level: str,
        msg: str,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> None:
        method = getattr(self._logger, level, None)
        if method is None and level == "warning":
            method = getattr(self._logger, "warn", None)
        if method is None:
            return
        try:
            method(msg, *args, **kwargs)
        except Exception:  # noqa: BLE001
            pass
