"""Rules - identities, registry, and the rule implementations."""

from capturelint.rules.base import Example, Rule, RuleDescription
from capturelint.rules.examples import ExampleMismatch, verify_examples
from capturelint.rules.registry import RuleRegistry, registry
from capturelint.rules.self_capturing_closure import SelfCapturingClosureRule

registry.register(SelfCapturingClosureRule())

__all__ = [
    "Example",
    "ExampleMismatch",
    "Rule",
    "RuleDescription",
    "RuleRegistry",
    "SelfCapturingClosureRule",
    "registry",
    "verify_examples",
]
