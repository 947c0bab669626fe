"""
utils/logger.py
---------------
Centralized logging configuration.
All modules should use `get_logger(__name__)` to obtain a logger instance.
The bot token travels inside every Bot API URL, so the stdout handler
redacts known secrets before anything is written.
"""

import logging
import sys
from typing import Iterable, Optional, Sequence

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_REDACTED_PLACEHOLDER = "[REDACTED]"
_initialized = False
_handler: Optional[logging.Handler] = None


class RedactingFormatter(logging.Formatter):
    """Formatter that replaces secret values in the rendered record."""

    def __init__(self, fmt: str, datefmt: str, secrets: Sequence[str] = ()) -> None:
        super().__init__(fmt, datefmt)
        self._secrets = tuple(secrets)

    def update_secrets(self, secrets: Iterable[str]) -> None:
        self._secrets = tuple(s for s in secrets if s)

    def format(self, record: logging.LogRecord) -> str:
        formatted = super().format(record)
        for secret in self._secrets:
            formatted = formatted.replace(secret, _REDACTED_PLACEHOLDER)
        return formatted


def _init_logging() -> None:
    """Configure the root logger once."""
    global _initialized, _handler
    if _initialized:
        return
    _handler = logging.StreamHandler(sys.stdout)
    _handler.setFormatter(RedactingFormatter(_LOG_FORMAT, _DATE_FORMAT))
    root = logging.getLogger()
    root.setLevel(logging.INFO)
    root.addHandler(_handler)
    _initialized = True


def configure_logging(debug: bool = False, secrets: Iterable[str] = ()) -> None:
    """
    Apply runtime settings to the already initialized root logger.

    Args:
        debug: Turn on verbose output, including the raw Bot API traffic
            logged by ``telegram`` and ``httpx``.
        secrets: Values that must never appear in log output.
    """
    _init_logging()
    logging.getLogger().setLevel(logging.DEBUG if debug else logging.INFO)
    # httpx logs every getUpdates call at INFO
    logging.getLogger("httpx").setLevel(logging.DEBUG if debug else logging.WARNING)
    formatter = _handler.formatter
    if isinstance(formatter, RedactingFormatter):
        formatter.update_secrets(secrets)


def get_logger(name: str) -> logging.Logger:
    """
    Get a named logger instance.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        A configured logging.Logger.
    """
    _init_logging()
    return logging.getLogger(name)
