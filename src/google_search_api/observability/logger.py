"""Structured logging configuration."""

import logging
import re
import sys
from typing import Any, Optional

import structlog

_KEY_PARAM = re.compile(r"([?&]key=)[^&]*")


def redact_api_key(url: str) -> str:
    """Mask the value of the ``key`` query parameter in a URL."""
    return _KEY_PARAM.sub(r"\1***", url)


def _redact_urls(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Processor masking API keys in any ``url`` field of an event."""
    url = event_dict.get("url")
    if isinstance(url, str):
        event_dict["url"] = redact_api_key(url)
    return event_dict


def setup_logging(log_level: str = "INFO") -> None:
    """
    Setup structured logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            _redact_urls,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, log_level.upper()),
    )


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger for ``name`` (usually ``__name__``)."""
    return structlog.get_logger(name)
