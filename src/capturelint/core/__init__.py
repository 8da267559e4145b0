"""Core module exports."""

from capturelint.core.errors import (
    CapturelintError,
    ConfigError,
    ErrorCode,
    InternalError,
    ParseError,
    RuleError,
)
from capturelint.core.logging import (
    clear_run_id,
    configure_logging,
    get_logger,
    get_run_id,
    set_run_id,
)

__all__ = [
    # Errors
    "CapturelintError",
    "ConfigError",
    "ErrorCode",
    "InternalError",
    "ParseError",
    "RuleError",
    # Logging
    "clear_run_id",
    "configure_logging",
    "get_logger",
    "get_run_id",
    "set_run_id",
]
