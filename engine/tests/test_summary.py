"""Tests for the summary store — workspace ↔ application association."""

from __future__ import annotations

import pytest

from keel.errors import (
    AlreadyAssociatedError,
    ManifestDecodeError,
    NotAssociatedError,
    RootNotFoundError,
)
from keel.services.workspace import Workspace

from conftest import PROJECT_DIR

SUMMARY_PATH = PROJECT_DIR / "copilot" / ".workspace"


def test_read_without_summary(workspace):
    with pytest.raises(NotAssociatedError):
        workspace.summary()


def test_read_without_workspace(memfs):
    with pytest.raises(RootNotFoundError):
        Workspace(PROJECT_DIR, fs=memfs).summary()


def test_create_is_idempotent(workspace, memfs):
    workspace.create("acme")
    workspace.create("acme")
    assert workspace.summary().application == "acme"
    assert memfs.read_bytes(SUMMARY_PATH) == b"application: acme\n"


def test_create_with_different_application_fails(workspace, memfs):
    workspace.create("acme")
    with pytest.raises(AlreadyAssociatedError) as exc_info:
        workspace.create("globex")
    assert exc_info.value.existing_name == "acme"
    assert workspace.summary().application == "acme"
    assert memfs.read_bytes(SUMMARY_PATH) == b"application: acme\n"


def test_create_makes_marker_directory(memfs):
    ws = Workspace(PROJECT_DIR, fs=memfs)
    ws.create("acme")
    assert memfs.is_dir(PROJECT_DIR / "copilot")
    assert ws.root == PROJECT_DIR / "copilot"
    assert ws.summary().application == "acme"


def test_create_from_subdirectory_uses_existing_root(workspace, memfs):
    workspace.create("acme")
    nested = PROJECT_DIR / "src" / "api"
    memfs.make_dirs(nested)

    ws = Workspace(nested, fs=memfs)
    ws.create("acme")
    assert ws.root == PROJECT_DIR / "copilot"
    assert not memfs.exists(nested / "copilot")


def test_read_ignores_unknown_fields(workspace, memfs):
    memfs.write_bytes(SUMMARY_PATH, b"application: acme\nowner: platform\n")
    assert workspace.summary().application == "acme"


@pytest.mark.parametrize(
    "body",
    [
        b"application: [unterminated\n",
        b"- just\n- a list\n",
        b"application: [1, 2]\n",
    ],
)
def test_corrupt_summary_raises(workspace, memfs, body):
    memfs.write_bytes(SUMMARY_PATH, body)
    with pytest.raises(ManifestDecodeError) as exc_info:
        workspace.summary()
    assert exc_info.value.path == SUMMARY_PATH


@pytest.mark.parametrize(
    "body, application",
    [
        (b"application:\n", ""),
        (b"application: 2024\n", "2024"),
        (b"application: acme\n---\napplication: globex\n", "acme"),
    ],
)
def test_summary_scalars_read_as_text(workspace, memfs, body, application):
    memfs.write_bytes(SUMMARY_PATH, body)
    assert workspace.summary().application == application


def test_corrupt_summary_blocks_create(workspace, memfs):
    memfs.write_bytes(SUMMARY_PATH, b"- not a mapping\n")
    with pytest.raises(ManifestDecodeError):
        workspace.create("acme")


def test_delete_removes_only_summary(workspace, memfs, add_workload):
    workspace.create("acme")
    manifest = add_workload("api", "type: Backend Service\n")

    workspace.summaries.delete()

    with pytest.raises(NotAssociatedError):
        workspace.summary()
    assert memfs.is_file(manifest)
    assert memfs.is_dir(PROJECT_DIR / "copilot")


def test_delete_without_summary_raises_io_error(workspace):
    with pytest.raises(OSError):
        workspace.summaries.delete()


def test_reassociate_after_delete(workspace):
    workspace.create("acme")
    workspace.summaries.delete()
    workspace.create("globex")
    assert workspace.summary().application == "globex"
