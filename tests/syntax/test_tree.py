"""Tests for syntax/tree.py module.

Covers:
- SwiftParser.parse() / parse_file()
- SyntaxTree.position_of()
- error handling for unreadable files and missing grammars
"""

from __future__ import annotations

from pathlib import Path

import pytest

from capturelint.core.errors import ErrorCode, ParseError
from capturelint.syntax import tree as tree_module
from capturelint.syntax.tree import SourcePosition, SwiftParser


class TestParse:
    """Tests for SwiftParser.parse()."""

    def test_parses_valid_source(self, swift_parser: SwiftParser) -> None:
        """Valid Swift parses without errors."""
        tree = swift_parser.parse("class Foo {\n    func bar() -> Int { return 1 }\n}\n")
        assert tree.root.type == "source_file"
        assert tree.error_count == 0
        assert not tree.has_errors
        assert tree.total_nodes > 1

    def test_accepts_str_and_bytes(self, swift_parser: SwiftParser) -> None:
        from_str = swift_parser.parse("let x = 1")
        from_bytes = swift_parser.parse(b"let x = 1")
        assert from_str.source == from_bytes.source == b"let x = 1"

    def test_broken_source_does_not_raise(self, swift_parser: SwiftParser) -> None:
        """Syntax errors are counted, not raised."""
        tree = swift_parser.parse("func (((( {")
        assert tree.has_errors
        assert tree.error_count > 0

    def test_default_path(self, swift_parser: SwiftParser) -> None:
        assert swift_parser.parse("").path == "<memory>"

    def test_parser_is_reusable(self, swift_parser: SwiftParser) -> None:
        """One parser instance parses many sources."""
        first = swift_parser.parse("let a = 1")
        second = swift_parser.parse("let b = 2")
        assert swift_parser.parse("let a = 1").total_nodes == first.total_nodes
        assert second.source == b"let b = 2"


class TestParseFile:
    """Tests for SwiftParser.parse_file()."""

    def test_reads_file(self, swift_parser: SwiftParser, tmp_path: Path) -> None:
        path = tmp_path / "Model.swift"
        path.write_text("struct Model {}\n")

        tree = swift_parser.parse_file(path)

        assert tree.path == str(path)
        assert tree.source == b"struct Model {}\n"

    def test_missing_file_raises_parse_error(self, swift_parser: SwiftParser, tmp_path: Path) -> None:
        with pytest.raises(ParseError) as exc_info:
            swift_parser.parse_file(tmp_path / "Missing.swift")

        assert exc_info.value.code == ErrorCode.PARSE_FILE_UNREADABLE
        assert exc_info.value.details["path"] == str(tmp_path / "Missing.swift")


class TestGrammarLoading:
    """Tests for grammar import failures."""

    def test_missing_grammar_raises_parse_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def _fail(name: str) -> None:
            raise ImportError(name)

        monkeypatch.setattr(tree_module.importlib, "import_module", _fail)

        with pytest.raises(ParseError) as exc_info:
            SwiftParser().parse("let x = 1")

        assert exc_info.value.code == ErrorCode.PARSE_GRAMMAR_UNAVAILABLE
        assert exc_info.value.details["module"] == "tree_sitter_swift"


class TestPositionOf:
    """Tests for SyntaxTree.position_of()."""

    def test_root_starts_at_first_token(self, swift_parser: SwiftParser) -> None:
        """Leading trivia is not part of a node's position."""
        source = "\n\n   // comment\n  let x = 1\n"
        tree = swift_parser.parse(source)
        decl = tree.root.named_children[-1]

        position = tree.position_of(decl)

        assert position == SourcePosition(line=4, column=3, offset=source.index("let"))

    def test_column_counts_characters(self, swift_parser: SwiftParser) -> None:
        """Multi-byte characters before a node count as one column each."""
        source = 'let s = "ééé"; let t = 2'
        tree = swift_parser.parse(source)
        second = tree.root.named_children[-1]

        position = tree.position_of(second)

        assert position.line == 1
        assert position.column == source.rindex("let") + 1
        assert position.offset == source.encode().rindex(b"let")

    def test_text_of(self, swift_parser: SwiftParser) -> None:
        tree = swift_parser.parse("let answer = 42")
        assert tree.text_of(tree.root) == "let answer = 42"
