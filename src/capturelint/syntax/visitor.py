"""Depth-first syntax visitor with explicit traversal control.

Subclasses implement ``visit_<kind>`` and ``visit_post_<kind>`` hooks named
after :class:`SyntaxKind` values (``visit_closure``,
``visit_post_self_reference``, ...). A pre-order hook returns a
:class:`VisitAction`; returning ``SKIP_CHILDREN`` prunes the subtree.
The post-order hook of a pruned node still runs.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Self

from capturelint.syntax.nodes import kind_of


class VisitAction(Enum):
    """What the walker does after a pre-order visit."""

    CONTINUE = "continue"
    SKIP_CHILDREN = "skip_children"


class SyntaxVisitor:
    """Base visitor. Walks named nodes only."""

    def visit(self, node: Any) -> VisitAction:
        hook = getattr(self, f"visit_{kind_of(node).value}", None)
        if hook is None:
            return VisitAction.CONTINUE
        return hook(node)  # type: ignore[no-any-return]

    def visit_post(self, node: Any) -> None:
        hook = getattr(self, f"visit_post_{kind_of(node).value}", None)
        if hook is not None:
            hook(node)

    def walk(self, node: Any | None) -> Self:
        """Traverse ``node`` and its descendants in source order.

        Uses an explicit stack so deeply nested sources cannot hit the
        interpreter's recursion limit. ``None`` is an empty walk.
        """
        if node is None:
            return self

        stack: list[tuple[Any, bool]] = [(node, False)]
        while stack:
            current, leaving = stack.pop()
            if leaving:
                self.visit_post(current)
                continue
            action = self.visit(current)
            stack.append((current, True))
            if action is VisitAction.CONTINUE:
                stack.extend((child, False) for child in reversed(current.named_children))
        return self
