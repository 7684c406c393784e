"""
Logfire Configuration Module

Optional logfire forwarding for snowflake-codec logs.

Usage:
    from snowflake_codec.core.logfire_config import initialize_logfire

    results = initialize_logfire()  # idempotent; safe to call at startup
    # results: {"configured": bool, "handler_attached": bool}
"""

import logging
from typing import Any, Dict, Optional

import logfire

from snowflake_codec.core.config import Settings, settings
from snowflake_codec.core.logger import ROOT_LOGGER_NAME, get_logger


class _LogfireState:
    """Internal state management for logfire configuration."""

    def __init__(self) -> None:
        self.configured = False

    def is_configured(self) -> bool:
        return self.configured

    def set_configured(self, value: bool) -> None:
        self.configured = value


_state = _LogfireState()


def is_logfire_enabled(config: Optional[Settings] = None) -> bool:
    """Check whether logfire forwarding is switched on."""
    return bool((config or settings).logfire__enabled)


def setup_logfire_handler() -> bool:
    """
    Attach logfire's logging handler to the snowflake_codec logger.

    Must be called after logfire.configure(). Idempotent.

    Returns:
        bool: True if a handler is attached after the call
    """
    codec_logger = logging.getLogger(ROOT_LOGGER_NAME)
    if any(isinstance(h, logfire.LogfireLoggingHandler) for h in codec_logger.handlers):
        return True

    get_logger("logfire").info("Forwarding snowflake_codec logs to Logfire")
    codec_logger.addHandler(logfire.LogfireLoggingHandler())
    return True


def initialize_logfire(config: Optional[Settings] = None) -> Dict[str, Any]:
    """
    Configure logfire from settings and forward codec logs to it.

    Args:
        config: Settings to read from; the global settings by default

    Returns:
        Dict with "configured" and "handler_attached" flags
    """
    config = config or settings
    results = {"configured": False, "handler_attached": False}

    if not is_logfire_enabled(config):
        return results

    if not _state.is_configured():
        token = config.logfire__token.get_secret_value() if config.logfire__token else None
        try:
            logfire.configure(
                service_name=config.logfire__service_name,
                environment=config.logfire__environment,
                token=token,
                send_to_logfire="if-token-present",
                console=False,
            )
        except (TypeError, ValueError) as e:
            get_logger("logfire").warning("Failed to configure Logfire: %s", e)
            return results
        _state.set_configured(True)

    results["configured"] = True
    results["handler_attached"] = setup_logfire_handler()
    return results
