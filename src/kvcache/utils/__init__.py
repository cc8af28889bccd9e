"""Utility helpers for kvcache."""

from kvcache.utils.log import SafeLogger, get_default_logger

__all__ = ["SafeLogger", "get_default_logger"]
