"""Discrimination of tree-sitter-swift nodes.

Rules never compare raw ``node.type`` strings; they go through
:func:`kind_of`, which folds every grammar node type into a small closed
set of :class:`SyntaxKind` values.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class SyntaxKind(Enum):
    """Node kinds the rules care about. Everything else is OTHER."""

    CLOSURE = "closure"
    CAPTURE_LIST = "capture_list"
    CAPTURE_ITEM = "capture_item"
    SELF_REFERENCE = "self_reference"
    IDENTIFIER = "identifier"
    STATEMENTS = "statements"
    ERROR = "error"
    OTHER = "other"


_KINDS_BY_TYPE: dict[str, SyntaxKind] = {
    "lambda_literal": SyntaxKind.CLOSURE,
    "capture_list": SyntaxKind.CAPTURE_LIST,
    "capture_list_item": SyntaxKind.CAPTURE_ITEM,
    "self_expression": SyntaxKind.SELF_REFERENCE,
    "simple_identifier": SyntaxKind.IDENTIFIER,
    "statements": SyntaxKind.STATEMENTS,
    "ERROR": SyntaxKind.ERROR,
}

SELF_KEYWORD = b"self"


def kind_of(node: Any) -> SyntaxKind:
    return _KINDS_BY_TYPE.get(node.type, SyntaxKind.OTHER)


def is_self_keyword(node: Any) -> bool:
    """True for a bare ``self`` token, whichever way the grammar spells it."""
    kind = kind_of(node)
    if kind is SyntaxKind.SELF_REFERENCE:
        return True
    return kind is SyntaxKind.IDENTIFIER and node.text == SELF_KEYWORD


def _first_named_child(node: Any, kind: SyntaxKind) -> Any | None:
    for child in node.named_children:
        if kind_of(child) is kind:
            return child
    return None


def capture_list(closure: Any) -> Any | None:
    """The closure's ``[...]`` capture list, if it declares one."""
    captures = closure.child_by_field_name("captures")
    if captures is not None:
        return captures
    return _first_named_child(closure, SyntaxKind.CAPTURE_LIST)


def capture_items(closure: Any) -> list[Any]:
    captures = capture_list(closure)
    if captures is None:
        return []
    return [c for c in captures.named_children if kind_of(c) is SyntaxKind.CAPTURE_ITEM]


def captured_expression(item: Any) -> Any | None:
    """The expression a capture list item captures.

    ``[x = expr]`` captures ``expr``; ``[weak self]`` and ``[self]`` capture
    the named value itself. Returns None for an item with no expression.
    """
    value = item.child_by_field_name("value")
    if value is not None:
        return value
    name = item.child_by_field_name("name")
    if name is not None:
        return name
    # Grammar versions without field names: skip the ownership specifier.
    for child in reversed(item.named_children):
        if child.type != "ownership_modifier":
            return child
    return None


def closure_body(closure: Any) -> Any | None:
    """The closure's statement list, or None for ``{}`` and damaged closures."""
    return _first_named_child(closure, SyntaxKind.STATEMENTS)
