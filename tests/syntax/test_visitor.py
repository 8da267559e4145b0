"""Tests for syntax/visitor.py module.

Covers:
- pre/post ordering of the depth-first walk
- SKIP_CHILDREN pruning
- kind-based hook dispatch
"""

from __future__ import annotations

from typing import Any

from capturelint.syntax.visitor import SyntaxVisitor, VisitAction


class _Recorder(SyntaxVisitor):
    def __init__(self, skip: str | None = None) -> None:
        self.events: list[str] = []
        self._skip = skip

    def visit(self, node: Any) -> VisitAction:
        self.events.append(f"enter:{node.text.decode()}")
        if node.text.decode() == self._skip:
            return VisitAction.SKIP_CHILDREN
        return VisitAction.CONTINUE

    def visit_post(self, node: Any) -> None:
        self.events.append(f"leave:{node.text.decode()}")


class TestWalkOrder:
    """Traversal order tests."""

    def test_given_tree_when_walk_then_pre_and_post_order(self, node: Any) -> None:
        """Children are visited in source order between enter and leave."""
        tree = node(
            "root",
            [
                node("a", [node("a1", text=b"a1")], text=b"a"),
                node("b", text=b"b"),
            ],
            text=b"root",
        )

        events = _Recorder().walk(tree).events

        assert events == [
            "enter:root",
            "enter:a",
            "enter:a1",
            "leave:a1",
            "leave:a",
            "enter:b",
            "leave:b",
            "leave:root",
        ]

    def test_given_skip_when_walk_then_children_pruned_but_post_runs(self, node: Any) -> None:
        """SKIP_CHILDREN prunes descendants; the node's own post hook still runs."""
        tree = node(
            "root",
            [node("a", [node("a1", text=b"a1")], text=b"a"), node("b", text=b"b")],
            text=b"root",
        )

        events = _Recorder(skip="a").walk(tree).events

        assert "enter:a1" not in events
        assert events.index("leave:a") < events.index("enter:b")

    def test_given_none_when_walk_then_nothing_visited(self) -> None:
        """Walking None is an empty walk."""
        assert _Recorder().walk(None).events == []

    def test_deep_tree_does_not_recurse(self, node: Any) -> None:
        """Very deep trees are walked without hitting the recursion limit."""
        leaf = node("leaf", text=b"leaf")
        current = leaf
        for _ in range(5000):
            current = node("wrap", [current], text=b"w")

        events = _Recorder().walk(current).events

        assert len(events) == 2 * 5001


class TestHookDispatch:
    """Kind-based hook tests."""

    def test_hooks_dispatch_on_kind(self, node: Any) -> None:
        """visit_<kind> and visit_post_<kind> are called for matching nodes."""

        class Closures(SyntaxVisitor):
            def __init__(self) -> None:
                self.entered: list[Any] = []
                self.left: list[Any] = []

            def visit_closure(self, n: Any) -> VisitAction:
                self.entered.append(n)
                return VisitAction.CONTINUE

            def visit_post_closure(self, n: Any) -> None:
                self.left.append(n)

        inner = node("lambda_literal")
        outer = node("lambda_literal", [node("statements", [inner])])
        tree = node("source_file", [outer])

        visitor = Closures().walk(tree)

        assert visitor.entered == [outer, inner]
        assert visitor.left == [inner, outer]

    def test_default_hook_continues(self, node: Any) -> None:
        """Nodes without hooks are descended into."""

        class SelfRefs(SyntaxVisitor):
            def __init__(self) -> None:
                self.found: list[Any] = []

            def visit_post_self_reference(self, n: Any) -> None:
                self.found.append(n)

        ref = node("self_expression", text=b"self")
        tree = node("source_file", [node("call_expression", [node("navigation_expression", [ref])])])

        assert SelfRefs().walk(tree).found == [ref]
