"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (CAPTURELINT__SECTION__KEY)
3. Repo YAML (.capturelint.yaml, or the file passed with --config)
4. Global YAML (~/.config/capturelint/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    CAPTURELINT__<SECTION>__<KEY>=<VALUE>

Examples:
    CAPTURELINT__LOGGING__LEVEL=DEBUG
    CAPTURELINT__LINT__STRICT=true
    CAPTURELINT__RULES__OPT_IN_RULES='["self_capturing_closure"]'
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
SeverityLevel = Literal["warning", "error"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration."""

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        CAPTURELINT__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. Lint results go to stdout regardless of this.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class RulesConfig(BaseModel):
    """Rule selection and severity.

    Env vars:
        CAPTURELINT__RULES__OPT_IN_RULES: JSON list of opt-in rule ids to enable
        CAPTURELINT__RULES__DISABLED_RULES: JSON list of rule ids to skip
        CAPTURELINT__RULES__ONLY_RULES: JSON list; when set, exactly these rules run
    """

    opt_in_rules: list[str] = Field(
        default_factory=list,
        description="Opt-in rules to enable. Opt-in rules never run otherwise.",
    )
    disabled_rules: list[str] = Field(
        default_factory=list,
        description="Default rules to skip.",
    )
    only_rules: list[str] | None = Field(
        default=None,
        description="Run exactly these rules, ignoring opt_in_rules and disabled_rules.",
    )
    severity: dict[str, SeverityLevel] = Field(
        default_factory=dict,
        description="Per-rule severity override, keyed by rule id.",
    )


class LintConfig(BaseModel):
    """File selection and run behavior.

    Env vars:
        CAPTURELINT__LINT__STRICT: Report every violation as an error
    """

    included: list[str] = Field(
        default_factory=lambda: ["*.swift"],
        description="Glob patterns (matched against file names) of files to lint "
        "when a directory is given.",
    )
    excluded: list[str] = Field(
        default_factory=lambda: [".build/*", "Pods/*", "Carthage/*", "DerivedData/*"],
        description="Glob patterns (matched against paths relative to the linted "
        "directory) to skip.",
    )
    strict: bool = Field(
        default=False,
        description="Upgrade warnings to errors.",
    )


class CapturelintConfig(BaseModel):
    """Root configuration for capturelint."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    rules: RulesConfig = Field(default_factory=RulesConfig)
    lint: LintConfig = Field(default_factory=LintConfig)
