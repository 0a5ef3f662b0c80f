"""
Logging helpers

Thin wrapper around the standard library logging module so every module
gets a consistently formatted, named logger.
"""

import logging
import os
import sys
from typing import Any, Optional

_DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_configured = False


def setup_logging(config: Optional[Any] = None) -> None:
    """
    Configure root logging once.

    Args:
        config: Object exposing LOG_LEVEL / LOG_FORMAT (e.g. Config). When
            omitted, the LOG_LEVEL / LOG_FORMAT environment variables are used.
    """
    global _configured
    if _configured:
        return

    level_name = getattr(config, "LOG_LEVEL", None) or os.getenv("LOG_LEVEL", "INFO")
    log_format = getattr(config, "LOG_FORMAT", None) or os.getenv("LOG_FORMAT", _DEFAULT_FORMAT)

    logging.basicConfig(
        level=getattr(logging, str(level_name).upper(), logging.INFO),
        format=log_format,
        stream=sys.stdout,
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def log_supabase_error(logger: logging.Logger, operation: str, error: Exception) -> None:
    """Log a Supabase/PostgREST error with whatever detail fields it carries."""
    logger.error(
        f"Supabase {operation} error: %s",
        {
            "message": getattr(error, "message", None) or str(error),
            "details": getattr(error, "details", None),
            "hint": getattr(error, "hint", None),
            "code": getattr(error, "code", None),
        },
    )
