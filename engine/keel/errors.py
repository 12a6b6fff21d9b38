"""Workspace error taxonomy.

Callers (the CLI in particular) branch on these types: a missing summary means
"not initialised yet", a missing marker directory means "not in a workspace",
and so on. Plain I/O failures surface as :class:`WorkspaceIOError`, which is
still an ``OSError``.
"""

from __future__ import annotations

from pathlib import Path


class WorkspaceError(Exception):
    """Base class for all workspace errors."""
    pass


class RootNotFoundError(WorkspaceError):
    """Raised when no marker directory exists within the search bound."""

    def __init__(self, start_dir: Path, marker_name: str, levels_checked: int):
        self.start_dir = start_dir
        self.marker_name = marker_name
        self.levels_checked = levels_checked
        super().__init__(
            f"couldn't find a directory called {marker_name} up to {levels_checked} "
            f"levels up from {start_dir}"
        )


class NotAssociatedError(WorkspaceError):
    """Raised when the workspace has no summary record yet."""

    def __init__(self) -> None:
        super().__init__("couldn't find an application associated with this workspace")


class AlreadyAssociatedError(WorkspaceError):
    """Raised when the workspace already belongs to a different application."""

    def __init__(self, existing_name: str):
        self.existing_name = existing_name
        super().__init__(
            f"this workspace is already registered with application {existing_name}"
        )


class FileAlreadyExistsError(WorkspaceError):
    """Raised instead of overwriting an existing workspace file."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"file {path} already exists")


class DockerfileNotFoundError(WorkspaceError):
    """Raised when no Dockerfile exists in a directory or one level below it."""

    def __init__(self, scanned_dir: Path):
        self.scanned_dir = scanned_dir
        super().__init__(f"no Dockerfiles found within {scanned_dir} or a sub-directory level below")


class NoPipelineError(WorkspaceError):
    """Raised when the workspace has no pipeline manifest."""

    def __init__(self) -> None:
        super().__init__("pipeline manifest not found in the workspace")


class ManifestDecodeError(WorkspaceError):
    """Raised when a workspace YAML file can't be decoded."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"decode {path}: {reason}")


class WorkspaceIOError(WorkspaceError, OSError):
    """Filesystem failure annotated with the operation that hit it."""
    pass
