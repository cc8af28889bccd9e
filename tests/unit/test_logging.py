"""Tests for logging helpers."""

import logging
from unittest.mock import MagicMock

import pytest

from kvcache.utils.log import SafeLogger, get_default_logger


class TestSafeLogger:
    """Tests for SafeLogger."""

    def test_forwards_calls(self) -> None:
        inner = MagicMock()
        logger = SafeLogger(inner)

        logger.debug("a %s", 1)
        logger.info("b")
        logger.warning("c")
        logger.error("d %s", "x", exc_info=True)

        inner.debug.assert_called_once_with("a %s", 1)
        inner.info.assert_called_once_with("b")
        inner.warning.assert_called_once_with("c")
        inner.error.assert_called_once_with("d %s", "x", exc_info=True)

    def test_swallows_logger_errors(self) -> None:
        inner = MagicMock()
        inner.error.side_effect = RuntimeError("boom")

        SafeLogger(inner).error("never raises")

    def test_defaults_to_library_logger(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test the stdlib kvcache logger is used when none is given."""
        logger = SafeLogger()

        with caplog.at_level(logging.INFO, logger="kvcache"):
            logger.info("hello %s", "world")

        assert logger.wrapped is get_default_logger()
        assert "hello world" in caplog.text

    def test_accepts_warn_only_logger(self) -> None:
        """Test a logger exposing warn instead of warning is used."""
        calls: list[str] = []

        class WarnLogger:
            def debug(self, msg: str, *args: object) -> None: ...

            def info(self, msg: str, *args: object) -> None: ...

            def warn(self, msg: str, *args: object) -> None:
                calls.append(msg % args)

            def error(self, msg: str, *args: object) -> None: ...

        logger = SafeLogger(WarnLogger())  # type: ignore[arg-type]
        logger.warning("slow %s", "scan")
        logger.warn("again")

        assert calls == ["slow scan", "again"]
