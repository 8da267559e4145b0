"""Lint operations - discover Swift files and run the selected rules."""

from __future__ import annotations

import fnmatch
import time
from collections.abc import Iterable
from pathlib import Path

import structlog

from capturelint.config.models import CapturelintConfig
from capturelint.core.errors import ParseError
from capturelint.core.logging import set_run_id
from capturelint.lint.models import FileResult, LintResult, Severity, Violation
from capturelint.rules import registry as default_registry
from capturelint.rules.base import Rule
from capturelint.rules.registry import RuleRegistry
from capturelint.syntax.tree import SwiftParser, SyntaxTree

log = structlog.get_logger()


def _matches_any(value: str, patterns: Iterable[str]) -> bool:
    return any(fnmatch.fnmatch(value, p) for p in patterns)


class Linter:
    """Runs rules over Swift sources.

    Rule selection and severities are resolved once, from configuration,
    when the linter is built. Each file is parsed and traversed on its own;
    nothing is carried from one file to the next.
    """

    def __init__(
        self,
        config: CapturelintConfig | None = None,
        *,
        enable: Iterable[str] = (),
        rules: RuleRegistry | None = None,
        parser: SwiftParser | None = None,
    ) -> None:
        self._config = config or CapturelintConfig()
        reg = rules or default_registry
        self._rules = reg.resolve(self._config.rules, enable)
        self._severities = {
            r.identifier: Severity.ERROR
            if self._config.lint.strict
            else reg.severity_for(r, self._config.rules)
            for r in self._rules
        }
        self._parser = parser or SwiftParser()

    @property
    def rules(self) -> list[Rule]:
        return list(self._rules)

    def lint_tree(self, tree: SyntaxTree) -> list[Violation]:
        """Apply every selected rule to an already parsed tree."""
        violations: list[Violation] = []
        for rule in self._rules:
            violations.extend(rule.validate(tree, self._severities[rule.identifier]))
        violations.sort(key=lambda v: (v.position.offset, v.rule_id))
        return violations

    def lint_source(self, source: bytes | str, path: str = "<memory>") -> list[Violation]:
        return self.lint_tree(self._parser.parse(source, path=path))

    def lint_file(self, path: Path) -> FileResult:
        """Lint one file. Read failures are recorded, not raised."""
        try:
            tree = self._parser.parse_file(path)
        except ParseError as e:
            log.warning("lint_file_failed", path=str(path), error=e.message)
            return FileResult(path=str(path), error_detail=e.message)

        violations = self.lint_tree(tree)
        log.debug(
            "lint_file_parsed",
            path=str(path),
            nodes=tree.total_nodes,
            parse_errors=tree.error_count,
            violations=len(violations),
        )
        return FileResult(path=str(path), violations=violations, parse_errors=tree.error_count)

    def discover(self, paths: Iterable[Path]) -> list[Path]:
        """Expand directories into the Swift files to lint.

        Files named explicitly are always linted. Files found under a
        directory must match ``lint.included`` and must not match
        ``lint.excluded`` (relative to that directory).
        """
        included = self._config.lint.included
        excluded = self._config.lint.excluded
        found: list[Path] = []
        seen: set[Path] = set()

        for root in paths:
            if not root.is_dir():
                candidates = [root]
            else:
                candidates = []
                for path in sorted(root.rglob("*")):
                    if not path.is_file() or not _matches_any(path.name, included):
                        continue
                    if _matches_any(path.relative_to(root).as_posix(), excluded):
                        continue
                    candidates.append(path)
            for path in candidates:
                if path not in seen:
                    seen.add(path)
                    found.append(path)
        return found

    def lint_paths(self, paths: Iterable[Path]) -> LintResult:
        """Discover and lint files under ``paths``."""
        start_time = time.time()
        set_run_id()
        files = self.discover(paths)
        rule_ids = [r.identifier for r in self._rules]
        log.info("lint_started", files=len(files), rules=rule_ids)

        result = LintResult(rules_run=rule_ids)
        for path in files:
            result.files.append(self.lint_file(path))

        result.duration_seconds = time.time() - start_time
        log.info(
            "lint_finished",
            files=len(result.files),
            violations=result.total_violations,
            duration_seconds=round(result.duration_seconds, 3),
        )
        return result
