"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from capturelint.syntax.tree import SwiftParser

# Insert local src directory at the beginning of sys.path
# This ensures that the local capturelint package is used, not any installed one
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

# Force reimport of capturelint modules if already imported
for module_name in list(sys.modules.keys()):
    if module_name.startswith("capturelint"):
        del sys.modules[module_name]


@pytest.fixture
def swift_parser() -> SwiftParser:
    """Fresh tree-sitter Swift parser."""
    from capturelint.syntax.tree import SwiftParser

    return SwiftParser()


@pytest.fixture(autouse=True)
def _no_global_config(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's ~/.config/capturelint out of tests."""
    from capturelint.config import loader

    monkeypatch.setattr(loader, "GLOBAL_CONFIG_PATH", tmp_path_factory.mktemp("home") / "config.yaml")


class FakeNode:
    """Minimal stand-in for a tree-sitter node, for grammar-independent tests."""

    _next_id = 0

    def __init__(
        self,
        type: str,
        children: list[FakeNode] | None = None,
        *,
        text: bytes = b"",
        fields: dict[str, FakeNode] | None = None,
    ) -> None:
        FakeNode._next_id += 1
        self.id = FakeNode._next_id
        self.type = type
        self.text = text
        self.named_children = list(children or [])
        self.parent: FakeNode | None = None
        self._fields = dict(fields or {})
        for child in [*self.named_children, *self._fields.values()]:
            child.parent = self

    def child_by_field_name(self, name: str) -> FakeNode | None:
        return self._fields.get(name)

    def __repr__(self) -> str:
        return f"FakeNode({self.type!r}, id={self.id})"


@pytest.fixture
def node() -> type[FakeNode]:
    """Factory for fake syntax nodes: ``node("lambda_literal", [...])``."""
    return FakeNode
