"""Lint models - violations and results."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Literal

from capturelint.syntax.tree import SourcePosition


class RuleKind(Enum):
    """Classification of a rule, used for documentation and filtering."""

    LINT = "lint"
    IDIOMATIC = "idiomatic"
    STYLE = "style"
    METRICS = "metrics"
    PERFORMANCE = "performance"


class Severity(Enum):
    """Violation severity level."""

    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Violation:
    """A single rule violation."""

    rule_id: str
    position: SourcePosition
    severity: Severity = Severity.WARNING
    path: str | None = None
    rule_name: str = ""
    reason: str = ""

    @property
    def line(self) -> int:
        return self.position.line

    @property
    def column(self) -> int:
        return self.position.column

    def with_severity(self, severity: Severity) -> Violation:
        return replace(self, severity=severity)

    def to_dict(self) -> dict[str, Any]:
        return {
            "rule_id": self.rule_id,
            "rule_name": self.rule_name,
            "severity": self.severity.value,
            "path": self.path,
            "line": self.position.line,
            "column": self.position.column,
            "offset": self.position.offset,
            "reason": self.reason,
        }


@dataclass
class FileResult:
    """Result from linting one file."""

    path: str
    violations: list[Violation] = field(default_factory=list)
    parse_errors: int = 0  # tree-sitter ERROR/missing nodes; linting still ran
    error_detail: str | None = None  # set when the file could not be linted at all

    @property
    def status(self) -> Literal["clean", "dirty", "error"]:
        if self.error_detail is not None:
            return "error"
        return "dirty" if self.violations else "clean"


@dataclass
class LintResult:
    """Aggregated result from a lint run."""

    rules_run: list[str] = field(default_factory=list)
    files: list[FileResult] = field(default_factory=list)
    duration_seconds: float = 0.0

    @property
    def violations(self) -> list[Violation]:
        return [v for f in self.files for v in f.violations]

    @property
    def total_violations(self) -> int:
        return sum(len(f.violations) for f in self.files)

    @property
    def has_errors(self) -> bool:
        return any(v.severity == Severity.ERROR for v in self.violations)

    @property
    def status(self) -> Literal["clean", "dirty", "error"]:
        if any(f.status == "error" for f in self.files):
            return "error"
        if any(f.status == "dirty" for f in self.files):
            return "dirty"
        return "clean"
