"""Check a rule against its own documented examples.

Non-triggering examples must produce no violations. Triggering examples
must produce violations exactly where their ``↓`` markers are.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from capturelint.rules.base import Example, Rule
from capturelint.syntax.tree import SwiftParser


@dataclass(frozen=True)
class ExampleMismatch:
    """An example whose violations differ from what it documents."""

    rule_id: str
    example: Example
    kind: Literal["triggering", "non_triggering"]
    expected_offsets: tuple[int, ...]
    actual_offsets: tuple[int, ...]

    def __str__(self) -> str:
        return (
            f"{self.rule_id}: {self.kind} example expected violations at "
            f"{list(self.expected_offsets)}, got {list(self.actual_offsets)}:\n{self.example.code}"
        )


def verify_examples(rule: Rule, parser: SwiftParser | None = None) -> list[ExampleMismatch]:
    """Run ``rule`` over its examples. An empty list means every example holds."""
    parser = parser or SwiftParser()
    description = rule.description
    mismatches: list[ExampleMismatch] = []

    cases: list[tuple[Example, Literal["triggering", "non_triggering"]]] = [
        *((e, "non_triggering") for e in description.non_triggering_examples),
        *((e, "triggering") for e in description.triggering_examples),
    ]
    for example, kind in cases:
        tree = parser.parse(example.without_markers(), path=f"<{description.identifier}>")
        actual = tuple(v.position.offset for v in rule.validate(tree))
        expected = tuple(example.marker_offsets()) if kind == "triggering" else ()
        if actual != expected:
            mismatches.append(
                ExampleMismatch(
                    rule_id=description.identifier,
                    example=example,
                    kind=kind,
                    expected_offsets=expected,
                    actual_offsets=actual,
                )
            )
    return mismatches
