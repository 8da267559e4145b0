"""Shared fixtures for CLI tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[Path, None, None]:
    """Run each command from an empty directory with no repo config."""
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    for name in list(os.environ):
        if name.startswith("CAPTURELINT__"):
            monkeypatch.delenv(name)
    yield workdir
    # Handlers point at CliRunner's streams, which are closed after invoke
    logging.getLogger().handlers.clear()
