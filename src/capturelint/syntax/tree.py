"""Tree-sitter parsing of Swift source.

Wraps a ``tree_sitter.Parser`` loaded with the ``tree-sitter-swift`` grammar
and exposes the result as a read-only :class:`SyntaxTree`.

Usage::

    parser = SwiftParser()
    tree = parser.parse(b"[1, 2].map { num in self.log(num) }")
    tree = parser.parse_file(Path("Sources/App/Model.swift"))
"""

from __future__ import annotations

import importlib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import structlog
import tree_sitter

from capturelint.core.errors import ParseError

GRAMMAR_MODULE = "tree_sitter_swift"

log = structlog.get_logger()


@dataclass(frozen=True, slots=True)
class SourcePosition:
    """A location in a source file.

    ``line`` and ``column`` are 1-based; ``column`` counts characters, not
    bytes. ``offset`` is the 0-based byte offset into the source.
    """

    line: int
    column: int
    offset: int


@dataclass
class SyntaxTree:
    """Result of parsing one file. Nodes are owned by ``tree``."""

    path: str
    source: bytes
    tree: Any  # tree_sitter.Tree (not serializable)
    error_count: int
    total_nodes: int

    @property
    def root(self) -> Any:
        return self.tree.root_node

    @property
    def has_errors(self) -> bool:
        return self.error_count > 0

    def position_of(self, node: Any) -> SourcePosition:
        """Position of the first byte of ``node``.

        Tree-sitter node ranges never include leading whitespace or
        comments, so this is already the position after leading trivia.
        """
        row, byte_column = node.start_point
        line_start = node.start_byte - byte_column
        prefix = self.source[line_start : node.start_byte]
        column = len(prefix.decode("utf-8", errors="replace")) + 1
        return SourcePosition(line=row + 1, column=column, offset=node.start_byte)

    def text_of(self, node: Any) -> str:
        return self.source[node.start_byte : node.end_byte].decode("utf-8", errors="replace")


@dataclass
class SwiftParser:
    """Tree-sitter parser for Swift.

    The grammar is loaded on first use and cached on the instance. A parser
    instance is not thread-safe; use one per thread.
    """

    _parser: Any = field(default=None, repr=False)
    _language: Any = field(default=None, repr=False)

    def _get_language(self) -> Any:
        if self._language is None:
            try:
                module = importlib.import_module(GRAMMAR_MODULE)
            except ImportError as err:
                raise ParseError.grammar_unavailable(GRAMMAR_MODULE) from err
            self._language = tree_sitter.Language(module.language())
        return self._language

    def parse(self, source: bytes | str, path: str = "<memory>") -> SyntaxTree:
        """Parse Swift source.

        Syntax errors do not raise: tree-sitter recovers and marks the
        damaged region with ERROR or missing nodes, which are counted.
        """
        if isinstance(source, str):
            source = source.encode("utf-8")

        if self._parser is None:
            self._parser = tree_sitter.Parser()
            self._parser.language = self._get_language()

        tree = self._parser.parse(source)

        error_count = 0
        total_nodes = 0
        stack = [tree.root_node]
        while stack:
            node = stack.pop()
            total_nodes += 1
            if node.type == "ERROR" or node.is_missing:
                error_count += 1
            stack.extend(node.children)

        if error_count:
            log.debug("parse_errors", path=path, error_count=error_count)

        return SyntaxTree(
            path=path,
            source=source,
            tree=tree,
            error_count=error_count,
            total_nodes=total_nodes,
        )

    def parse_file(self, path: Path) -> SyntaxTree:
        """Read and parse a file.

        Raises:
            ParseError: If the file cannot be read.
        """
        try:
            content = path.read_bytes()
        except OSError as e:
            raise ParseError.unreadable(str(path), e.strerror or str(e)) from e
        return self.parse(content, path=str(path))
