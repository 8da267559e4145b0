"""Swift syntax trees: parsing, node kinds, and traversal."""

from capturelint.syntax.nodes import SyntaxKind, kind_of
from capturelint.syntax.tree import SourcePosition, SwiftParser, SyntaxTree
from capturelint.syntax.visitor import SyntaxVisitor, VisitAction

__all__ = [
    "SourcePosition",
    "SwiftParser",
    "SyntaxKind",
    "SyntaxTree",
    "SyntaxVisitor",
    "VisitAction",
    "kind_of",
]
