"""Tests for the addon store."""

from __future__ import annotations

import pytest

from keel.errors import FileAlreadyExistsError, WorkspaceIOError

from conftest import PROJECT_DIR

ADDONS = PROJECT_DIR / "copilot" / "svcA" / "addons"


def test_write_then_read_addon(workspace):
    data = b"Resources:\n  Table:\n    Type: AWS::DynamoDB::Table\n\x00\xff"
    path = workspace.addons.write_addon("svcA", "policy", data)
    assert path == ADDONS / "policy.yml"
    assert workspace.addons.read_addon("svcA", "policy.yml") == data


def test_write_addon_never_overwrites(workspace):
    workspace.addons.write_addon("svcA", "policy", b"v1")
    with pytest.raises(FileAlreadyExistsError):
        workspace.addons.write_addon("svcA", "policy", b"v2")
    assert workspace.addons.read_addon("svcA", "policy.yml") == b"v1"


def test_list_addon_names(workspace, memfs):
    workspace.addons.write_addon("svcA", "table", b"")
    workspace.addons.write_addon("svcA", "bucket", b"")
    memfs.write_bytes(ADDONS / "params.json", b"{}")
    assert workspace.addons.list_addon_names("svcA") == ["bucket.yml", "params.json", "table.yml"]


def test_list_addons_missing_directory(workspace):
    with pytest.raises(WorkspaceIOError) as exc_info:
        workspace.addons.list_addon_names("svcA")
    assert isinstance(exc_info.value, OSError)
    assert isinstance(exc_info.value.__cause__, FileNotFoundError)


def test_read_missing_addon(workspace):
    with pytest.raises(FileNotFoundError):
        workspace.addons.read_addon("svcA", "nope.yml")
