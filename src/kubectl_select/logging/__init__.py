"""Logging configuration for kubectl_select."""

from kubectl_select.logging.config import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
