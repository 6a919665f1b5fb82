"""Logging configuration for the application."""

import logging
from logging.config import dictConfig
from typing import Any

from bookshelf.core.config import Settings, settings


def setup_logging(config: Settings | None = None) -> None:
    """Configure application logging.

    Log records go to ``config.log_stream`` (stderr by default) so that they
    never interleave with command output written to stdout.
    """
    config = config or settings
    level = config.log_level.upper()
    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "generic": {
                    "format": config.log_format_general,
                },
                "request": {
                    "format": config.log_format_request,
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "stream": config.log_stream,
                    "formatter": "generic",
                },
                "api_console": {
                    "class": "logging.StreamHandler",
                    "stream": config.log_stream,
                    "formatter": "request",
                },
            },
            "root": {
                "level": level,
                "handlers": ["console"],
            },
            "loggers": {
                "api.request": {
                    "level": level,
                    "handlers": ["api_console"],
                    "propagate": False,
                },
                "uvicorn.access": {
                    "level": "WARNING",
                },
                "uvicorn.error": {
                    "level": "INFO",
                },
            },
        }
    )


def get_logger(name: str) -> logging.Logger:
    """Get logger instance by name."""
    return logging.getLogger(name)


def log_request_info(
    method: str,
    path: str,
    status_code: int,
    duration_ms: float,
    **kwargs: Any,
) -> None:
    """Log structured request information."""
    logger = get_logger("api.request")
    logger.info(
        "Request completed",
        extra={
            "method": method,
            "path": path,
            "status_code": status_code,
            "duration_ms": duration_ms,
            **kwargs,
        },
    )
