"""Dockerfile discovery in the invocation directory and one level below it."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from ..config import settings
from ..errors import DockerfileNotFoundError, WorkspaceIOError
from ..fs import FileSystem, OSFileSystem

logger = logging.getLogger(__name__)


class BuildInputScanner:
    """Finds build contexts: directories holding a Dockerfile.

    Independent of the marker directory; it only looks at ``working_dir`` and
    its immediate subdirectories.
    """

    def __init__(
        self,
        working_dir: Path,
        fs: Optional[FileSystem] = None,
        dockerfile_name: Optional[str] = None,
    ) -> None:
        self.working_dir = Path(working_dir).absolute()
        self.fs = fs or OSFileSystem()
        self.dockerfile_name = dockerfile_name or settings.dockerfile_name

    def discover(self) -> list[str]:
        """Return Dockerfile paths relative to the working directory, sorted.

        The working directory itself renders as ``./Dockerfile``. Raises
        :class:`DockerfileNotFoundError` when none are found.
        """
        directories: list[str] = []
        for entry in self._list(self.working_dir):
            if not entry.is_dir:
                if entry.name == self.dockerfile_name:
                    directories.append(".")
                continue
            # Deeper directories are ignored.
            for sub in self._list(self.working_dir / entry.name):
                if not sub.is_dir and sub.name == self.dockerfile_name:
                    directories.append(entry.name)

        if not directories:
            raise DockerfileNotFoundError(self.working_dir)
        directories.sort()
        logger.debug("Found Dockerfiles in %s", ", ".join(directories))
        return [f"{d}/{self.dockerfile_name}" for d in directories]

    def _list(self, path: Path):
        try:
            return self.fs.list_dir(path)
        except OSError as e:
            raise WorkspaceIOError(f"read directory {path}: {e}") from e
