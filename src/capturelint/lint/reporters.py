"""Render lint results for terminals, editors, and machines."""

from __future__ import annotations

import json
from collections.abc import Callable

from capturelint.lint.models import LintResult, Violation


def format_xcode(violation: Violation) -> str:
    """One line in the format Xcode and most editors parse as a diagnostic."""
    return (
        f"{violation.path}:{violation.line}:{violation.column}: "
        f"{violation.severity.value}: {violation.rule_name} Violation: "
        f"{violation.reason} ({violation.rule_id})"
    )


def report_xcode(result: LintResult) -> str:
    lines = [format_xcode(v) for v in result.violations]
    lines.extend(
        f"{f.path}: error: {f.error_detail}" for f in result.files if f.error_detail is not None
    )
    return "\n".join(lines)


def report_json(result: LintResult) -> str:
    payload = {
        "status": result.status,
        "rules": result.rules_run,
        "files_checked": len(result.files),
        "violations": [v.to_dict() for v in result.violations],
        "errors": [
            {"path": f.path, "detail": f.error_detail}
            for f in result.files
            if f.error_detail is not None
        ],
    }
    return json.dumps(payload, indent=2)


REPORTERS: dict[str, Callable[[LintResult], str]] = {
    "xcode": report_xcode,
    "json": report_json,
}
