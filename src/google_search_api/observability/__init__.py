"""Observability - logging."""

from .logger import get_logger, redact_api_key, setup_logging

__all__ = [
    "get_logger",
    "redact_api_key",
    "setup_logging",
]
