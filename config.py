"""
config.py
---------
Central configuration module. Reads the bot settings from the
environment and exposes them as a typed ``Settings`` object.

Outside Google Cloud the variables come from a local .env file.
On Google Cloud the secret manager injects them into the process
environment, so the environment is read as-is.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from utils.logger import get_logger

logger = get_logger(__name__)

# Set by the Cloud Functions / Cloud Run runtimes
_CLOUD_MARKERS = ("X_GOOGLE_FUNCTION_REGION", "K_SERVICE")

_TRUE_LITERALS = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE_LITERALS = {"0", "f", "F", "FALSE", "false", "False"}


class ConfigError(Exception):
    """Raised when a required setting is missing or malformed."""


@dataclass
class Settings:
    """
    Process configuration.

    Attributes:
        telegram_token: Bot API token issued by @BotFather.
        debug: Verbose logging of Bot API traffic.
        webhook_path: URL path the webhook app listens on.
        port: Port the webhook app binds to.
    """
    telegram_token: str
    debug: bool = False
    webhook_path: str = "/webhook"
    port: int = 8080


def parse_bool(value: str) -> bool:
    """Parse a boolean literal, raising ValueError on anything unknown."""
    if value in _TRUE_LITERALS:
        return True
    if value in _FALSE_LITERALS:
        return False
    raise ValueError(f"invalid boolean literal: {value!r}")


def running_on_gcp(environ: Optional[Mapping[str, str]] = None) -> bool:
    environ = os.environ if environ is None else environ
    return any(marker in environ for marker in _CLOUD_MARKERS)


def load_environment() -> None:
    """Populate ``os.environ`` from .env unless running on Google Cloud."""
    if running_on_gcp():
        logger.info("Running on Google Cloud, reading secrets from the environment.")
        return
    logger.info("Running not on Google Cloud, loading '.env' file.")
    if not load_dotenv():
        logger.warning("Can't find .env file nearby, using process environment only.")


def read_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build ``Settings`` from an environment mapping.

    Raises:
        ConfigError: If the token is missing or PORT is not a number.
    """
    environ = os.environ if environ is None else environ

    token = environ.get("TELEGRAM_APITOKEN", "").strip()
    if not token:
        raise ConfigError("Can't find TELEGRAM_APITOKEN environment variable.")

    raw_debug = environ.get("TELEGRAM_DEBUG", "")
    try:
        debug = parse_bool(raw_debug)
    except ValueError as e:
        logger.warning(f"Can't read TELEGRAM_DEBUG environment variable, will use FALSE value: {e}")
        debug = False

    try:
        port = int(environ.get("PORT", "8080"))
    except ValueError as e:
        raise ConfigError(f"PORT must be an integer: {e}") from e

    settings = Settings(
        telegram_token=token,
        debug=debug,
        webhook_path=environ.get("WEBHOOK_PATH", "/webhook"),
        port=port,
    )
    logger.info(f"Got from environment len(TELEGRAM_APITOKEN)={len(token)}, DEBUG={debug}")
    return settings


def load_settings() -> Settings:
    """Load the environment for the current platform and read settings."""
    load_environment()
    return read_settings()
