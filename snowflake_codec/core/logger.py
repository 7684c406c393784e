"""
Core Logger Module

Centralized logging configuration for snowflake-codec.
Logfire forwarding is attached separately by logfire_config.initialize_logfire().
"""

import logging
import logging.config
import sys
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

from snowflake_codec.core.config import settings

ROOT_LOGGER_NAME = "snowflake_codec"


def _get_setting(name: str, default: Any) -> Any:
    """Get a setting with a default fallback."""
    return getattr(settings, name, default)


def get_logging_config() -> Dict[str, Any]:
    """
    Generate base logging configuration (console + file).

    Returns:
        Dict: Base logging configuration dictionary
    """

    log_level = (_get_setting("log_level", "info") or "info").upper()

    logs_dir = Path(_get_setting("log__dir", "logs"))
    logs_dir.mkdir(parents=True, exist_ok=True)

    file_path = _get_setting("log__file_path", None)
    if file_path is None:
        file_path = str(logs_dir / "snowflake_codec.log")

    handlers = {
        "console": {
            "class": "logging.StreamHandler",
            "level": log_level,
            "formatter": "simple",
            "stream": sys.stdout,
        },
        "file": {
            "class": "logging.handlers.RotatingFileHandler",
            "level": _get_setting("log__file_level", "INFO"),
            "formatter": "detailed",
            "filename": file_path,
            "maxBytes": int(_get_setting("log__file_max_bytes", 10 * 1024 * 1024)),
            "backupCount": int(_get_setting("log__file_backup_count", 3)),
            "encoding": "utf-8",
        },
    }

    config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "simple": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                "datefmt": "%H:%M:%S",
            },
            "detailed": {
                "format": (
                    "%(asctime)s - %(name)s - %(levelname)s - "
                    "%(module)s:%(lineno)d - %(message)s"
                ),
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": handlers,
        "loggers": {
            ROOT_LOGGER_NAME: {
                "level": log_level,
                "handlers": ["console", "file"],
                "propagate": False,
            },
        },
        "root": {"level": "WARNING", "handlers": ["console"]},
    }

    return config


@lru_cache(maxsize=1)
def setup_logging() -> None:
    """
    Set up base logging configuration (console + file handlers).
    Safe to call repeatedly; only the first call configures anything.
    """

    config = get_logging_config()
    logging.config.dictConfig(config)

    logger = logging.getLogger(f"{ROOT_LOGGER_NAME}.startup")
    logger.info(
        "Logging system initialized - Environment: %s, Level: %s, Logfire: %s",
        _get_setting("environment", "development"),
        _get_setting("log_level", "info"),
        _get_setting("logfire__enabled", False),
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance with automatic 'snowflake_codec' prefix.

    Args:
        name: Logger name, typically __name__ of the calling module.
              Will be prefixed with 'snowflake_codec.' if not already present.

    Returns:
        Logger: Configured logger instance

    Example:
        logger = get_logger(__name__)
        logger.info("This is an info message")
    """

    setup_logging()

    if not name.startswith(ROOT_LOGGER_NAME):
        name = f"{ROOT_LOGGER_NAME}.{name}"

    return logging.getLogger(name)
