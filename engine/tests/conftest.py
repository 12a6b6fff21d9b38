"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from keel.fs import MemoryFileSystem
from keel.services.workspace import Workspace

PROJECT_DIR = Path("/home/user/app")


@pytest.fixture
def memfs() -> MemoryFileSystem:
    fs = MemoryFileSystem()
    fs.make_dirs(PROJECT_DIR)
    return fs


@pytest.fixture
def workspace(memfs: MemoryFileSystem) -> Workspace:
    """An in-memory workspace with an empty copilot/ directory."""
    memfs.make_dirs(PROJECT_DIR / "copilot")
    return Workspace(PROJECT_DIR, fs=memfs)


@pytest.fixture
def add_workload(memfs: MemoryFileSystem):
    """Write copilot/<name>/manifest.yml directly, bypassing the store."""

    def _add(name: str, body: str) -> Path:
        path = PROJECT_DIR / "copilot" / name / "manifest.yml"
        memfs.make_dirs(path.parent)
        memfs.write_bytes(path, body.encode("utf-8"))
        return path

    return _add
