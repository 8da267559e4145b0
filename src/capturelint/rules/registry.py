"""Rule registry - lookup and selection of rules to run."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from capturelint.core.errors import ConfigError, RuleError
from capturelint.lint.models import RuleKind, Severity
from capturelint.rules.base import Rule

if TYPE_CHECKING:
    from capturelint.config.models import RulesConfig


class RuleRegistry:
    """Registry of rules, keyed by identifier."""

    def __init__(self) -> None:
        self._rules: dict[str, Rule] = {}

    def register(self, rule: Rule) -> None:
        """Register a rule."""
        self._rules[rule.identifier] = rule

    def get(self, rule_id: str) -> Rule | None:
        """Get rule by ID."""
        return self._rules.get(rule_id)

    def require(self, rule_id: str) -> Rule:
        """Get rule by ID, raising RuleError if unknown."""
        rule = self._rules.get(rule_id)
        if rule is None:
            raise RuleError.unknown(rule_id)
        return rule

    def all(self) -> list[Rule]:
        """Get all registered rules, sorted by identifier."""
        return [self._rules[k] for k in sorted(self._rules)]

    def for_kind(self, kind: RuleKind) -> list[Rule]:
        """Get rules of a kind."""
        return [r for r in self.all() if r.description.kind == kind]

    def _check_known(self, field: str, rule_ids: Iterable[str]) -> None:
        unknown = sorted(set(rule_ids) - set(self._rules))
        if unknown:
            raise ConfigError.invalid_value(field, unknown, f"unknown rule(s): {', '.join(unknown)}")

    def resolve(self, config: RulesConfig, enable: Iterable[str] = ()) -> list[Rule]:
        """Select the rules a run should apply.

        Opt-in rules run only when listed in ``opt_in_rules`` or ``enable``.
        ``only_rules``, when set, replaces every other selection setting.

        Raises:
            ConfigError: If any setting names a rule that is not registered.
        """
        enable = list(enable)
        self._check_known("rules.opt_in_rules", config.opt_in_rules)
        self._check_known("rules.disabled_rules", config.disabled_rules)
        self._check_known("rules.severity", config.severity)
        self._check_known("enable", enable)

        if config.only_rules is not None:
            self._check_known("rules.only_rules", config.only_rules)
            selected = set(config.only_rules) | set(enable)
            return [r for r in self.all() if r.identifier in selected]

        opted_in = set(config.opt_in_rules) | set(enable)
        disabled = set(config.disabled_rules) - set(enable)
        return [
            r
            for r in self.all()
            if r.identifier not in disabled and (not r.description.opt_in or r.identifier in opted_in)
        ]

    def severity_for(self, rule: Rule, config: RulesConfig) -> Severity:
        """Configured severity for a rule, falling back to its default."""
        configured = config.severity.get(rule.identifier)
        if configured is None:
            return rule.default_severity
        return Severity(configured)

    def clear(self) -> None:
        """Clear all registered rules."""
        self._rules.clear()


# Global registry
registry = RuleRegistry()
