"""self_capturing_closure: closures must declare how they capture ``self``.

A closure that uses ``self`` without listing it in its capture list holds a
strong reference to the enclosing object that is easy to miss in review.
The rule asks for ``[self]``, ``[unowned self]`` or ``[weak self]`` so the
ownership choice is written down where the closure is created.

Each closure is judged on its own body only. A closure nested inside
another one is a separate capture scope and must declare ``self`` again
even when the outer closure already did.
"""

from __future__ import annotations

from typing import Any

from capturelint.lint.models import RuleKind, Severity, Violation
from capturelint.rules.base import Example, Rule, RuleDescription
from capturelint.syntax.nodes import capture_items, captured_expression, closure_body, is_self_keyword
from capturelint.syntax.tree import SyntaxTree
from capturelint.syntax.visitor import SyntaxVisitor, VisitAction


def captures_self_explicitly(closure: Any) -> bool:
    """True if the capture list names bare ``self``, whatever the specifier."""
    for item in capture_items(closure):
        expression = captured_expression(item)
        if expression is not None and is_self_keyword(expression):
            return True
    return False


class SelfReferenceFinder(SyntaxVisitor):
    """Collects ``self`` references in a closure body, excluding nested closures."""

    def __init__(self) -> None:
        self._found: dict[int, Any] = {}

    @property
    def found_self_references(self) -> list[Any]:
        return list(self._found.values())

    def visit_closure(self, node: Any) -> VisitAction:  # noqa: ARG002
        # nested closures are checked on their own
        return VisitAction.SKIP_CHILDREN

    def visit_post_self_reference(self, node: Any) -> None:
        parent = node.parent
        # `Type.self` metatype access
        if parent is not None and parent.type == "navigation_suffix":
            return
        self._found[node.id] = node


class SelfCapturingClosureVisitor(SyntaxVisitor):
    """Walks a whole file and reports each closure that captures ``self`` implicitly."""

    def __init__(self, tree: SyntaxTree, description: RuleDescription, severity: Severity) -> None:
        self._tree = tree
        self._description = description
        self._severity = severity
        self.violations: list[Violation] = []

    def visit_post_closure(self, node: Any) -> None:
        if captures_self_explicitly(node):
            return

        found = SelfReferenceFinder().walk(closure_body(node)).found_self_references
        if not found:
            return

        self.violations.append(
            Violation(
                rule_id=self._description.identifier,
                position=self._tree.position_of(node),
                severity=self._severity,
                path=self._tree.path,
                rule_name=self._description.name,
                reason=self._description.description,
            )
        )


class SelfCapturingClosureRule(Rule):
    """Self references in closures should be marked explicitly or be weak."""

    description = RuleDescription(
        identifier="self_capturing_closure",
        name="Self Capturing Closure",
        description="Self references in closures should be marked explicitly "
        "or should be weak to avoid reference cycles",
        kind=RuleKind.LINT,
        opt_in=True,
        non_triggering_examples=(
            Example("[1, 2].map { [self] num in\n    self.handle(num)\n}"),
            Example("[1, 2].map { [unowned self] num in\n    self.handle(num)\n}"),
            Example("[1, 2].map { [weak self] num in\n    self?.handle(num)\n}"),
            Example("[1, 2].map { num in\n    handle(num)\n}"),
        ),
        triggering_examples=(
            Example("[1, 2].map ↓{ num in\n    self.log(num)\n}"),
            Example(
                "[1, 2].map { [self] num1 in\n"
                "    [1, 2].map ↓{ num2 in\n"
                '        self.log("\\(num1), \\(num2)")\n'
                "    }\n"
                "}"
            ),
        ),
    )

    def validate(self, tree: SyntaxTree, severity: Severity | None = None) -> list[Violation]:
        visitor = SelfCapturingClosureVisitor(
            tree,
            self.description,
            severity=severity or self.default_severity,
        )
        visitor.walk(tree.root)
        return sorted(visitor.violations, key=lambda v: v.position.offset)
