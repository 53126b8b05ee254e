"""Logging setup for applications and the CLI.

The SDK itself only emits through module loggers; nothing here runs on import.
"""

import logging

VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

NOISY_HTTP_LOGGERS = (
    "httpx",
    "httpcore",
    "httpcore.http11",
    "httpcore.connection",
)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def normalize_level(level: str) -> str:
    """Return an upper-case level name, falling back to WARNING."""
    # Extract just the first word to tolerate trailing comments in .env files
    words = str(level or "").split()
    name = words[0].upper() if words else ""
    return name if name in VALID_LEVELS else "WARNING"


def set_noisy_http_logger_levels(current_log_level: str) -> None:
    """Ensure HTTP client noise only surfaces at DEBUG level."""

    noisy_level = logging.DEBUG if current_log_level == "DEBUG" else logging.WARNING
    for logger_name in NOISY_HTTP_LOGGERS:
        logging.getLogger(logger_name).setLevel(noisy_level)


def configure_logging(level: str = "WARNING") -> str:
    """Configure root logging for an application using the SDK.

    Returns:
        The effective level name
    """
    log_level = normalize_level(level)
    logging.basicConfig(level=getattr(logging, log_level), format=LOG_FORMAT, force=True)
    logging.getLogger("tiktok_open_sdk").setLevel(getattr(logging, log_level))
    set_noisy_http_logger_levels(log_level)
    return log_level
