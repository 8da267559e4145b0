"""Rule identity and the rule base class."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from capturelint.lint.models import RuleKind, Severity, Violation
from capturelint.syntax.tree import SyntaxTree

VIOLATION_MARKER = "↓"


@dataclass(frozen=True)
class Example:
    """A documented code sample.

    In triggering examples each ``↓`` marks where a violation is expected.
    """

    code: str

    def without_markers(self) -> str:
        return self.code.replace(VIOLATION_MARKER, "")

    def marker_offsets(self) -> list[int]:
        """Byte offsets of the markers in the marker-free UTF-8 source."""
        offsets: list[int] = []
        consumed = 0
        for chunk in self.code.split(VIOLATION_MARKER)[:-1]:
            consumed += len(chunk.encode("utf-8"))
            offsets.append(consumed)
        return offsets


@dataclass(frozen=True)
class RuleDescription:
    """Stable identity and documentation of a rule."""

    identifier: str
    name: str
    description: str
    kind: RuleKind
    non_triggering_examples: tuple[Example, ...] = field(default_factory=tuple)
    triggering_examples: tuple[Example, ...] = field(default_factory=tuple)
    opt_in: bool = False


class Rule:
    """Base class for rules.

    A rule is stateless; every call to :meth:`validate` builds its own
    visitor, so one instance may serve many files and threads.
    """

    description: ClassVar[RuleDescription]
    default_severity: ClassVar[Severity] = Severity.WARNING

    @property
    def identifier(self) -> str:
        return self.description.identifier

    def validate(self, tree: SyntaxTree, severity: Severity | None = None) -> list[Violation]:
        raise NotImplementedError("validate() must be implemented")
