"""Root locator — finds the workspace marker directory by walking up from a start dir."""

from __future__ import annotations

import logging
from pathlib import Path
from threading import Lock
from typing import Optional

from ..config import settings
from ..errors import RootNotFoundError, WorkspaceIOError
from ..fs import FileSystem, OSFileSystem

logger = logging.getLogger(__name__)


class RootLocator:
    """Resolves and memoizes the absolute path of the marker directory.

    The search checks ``<dir>/<marker>`` for the working directory and each of
    its ancestors up to ``max_parent_dirs`` levels above it. A working
    directory that is itself named after the marker is returned as-is.
    """

    def __init__(
        self,
        working_dir: Path,
        fs: Optional[FileSystem] = None,
        marker_name: Optional[str] = None,
        max_parent_dirs: Optional[int] = None,
    ) -> None:
        self.working_dir = Path(working_dir).absolute()
        self.fs = fs or OSFileSystem()
        self.marker_name = marker_name or settings.marker_dir_name
        self.max_parent_dirs = (
            max_parent_dirs if max_parent_dirs is not None else settings.max_parent_dirs
        )
        self._root: Optional[Path] = None
        self._lock = Lock()

    def locate(self) -> Path:
        """Return the marker directory, searching only on the first success."""
        if self._root is not None:
            return self._root
        with self._lock:
            if self._root is None:
                self._root = self._search()
                logger.debug("Resolved workspace root %s", self._root)
            return self._root

    def _search(self) -> Path:
        if self.working_dir.name == self.marker_name:
            return self.working_dir

        searching = self.working_dir
        for _ in range(self.max_parent_dirs + 1):
            candidate = searching / self.marker_name
            if self.fs.is_dir(candidate):
                return candidate
            searching = searching.parent
        raise RootNotFoundError(self.working_dir, self.marker_name, self.max_parent_dirs)

    def create(self) -> Path:
        """Make the marker directory under the working dir unless one is found.

        Idempotent: an existing marker directory, here or in an ancestor, is
        returned unchanged.
        """
        try:
            return self.locate()
        except RootNotFoundError:
            pass
        target = self.working_dir / self.marker_name
        try:
            self.fs.make_dirs(target)
        except OSError as e:
            raise WorkspaceIOError(f"create directory {target}: {e}") from e
        logger.info("Created workspace directory %s", target)
        return self.locate()


def is_in_git_repository(fs: FileSystem, directory: Path) -> bool:
    """Return True if *directory* is the top of a git checkout."""
    return fs.exists(Path(directory) / ".git")
