"""Config module exports."""

from capturelint.config.loader import load_config
from capturelint.config.models import (
    CapturelintConfig,
    LintConfig,
    LoggingConfig,
    LogOutputConfig,
    RulesConfig,
)

__all__ = [
    "load_config",
    "CapturelintConfig",
    "LintConfig",
    "LoggingConfig",
    "LogOutputConfig",
    "RulesConfig",
]
