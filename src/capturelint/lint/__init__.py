"""Lint module - violation models and reporters.

The runner lives in :mod:`capturelint.lint.ops`; it is not re-exported here
because it depends on :mod:`capturelint.rules`, which depends on these models.
"""

from capturelint.lint.models import FileResult, LintResult, RuleKind, Severity, Violation
from capturelint.lint.reporters import REPORTERS, format_xcode, report_json, report_xcode

__all__ = [
    "FileResult",
    "LintResult",
    "REPORTERS",
    "RuleKind",
    "Severity",
    "Violation",
    "format_xcode",
    "report_json",
    "report_xcode",
]
