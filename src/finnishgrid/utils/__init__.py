"""Shared utilities."""

from .logging_config import ColoredFormatter, LogColors, configure_logging

__all__ = ["ColoredFormatter", "LogColors", "configure_logging"]
