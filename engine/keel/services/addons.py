"""Addon store — schema-free files attached to a workload."""

from __future__ import annotations

from pathlib import Path

from ..errors import WorkspaceIOError
from .store import RootedStore

ADDONS_DIR_NAME = "addons"
YML_FILE_EXTENSION = ".yml"


class AddonStore(RootedStore):
    """Files under ``<root>/<workload>/addons/``."""

    def list_addon_names(self, workload: str) -> list[str]:
        path = self._path(workload, ADDONS_DIR_NAME)
        try:
            return [entry.name for entry in self.fs.list_dir(path)]
        except OSError as e:
            raise WorkspaceIOError(f"read addons directory {path}: {e}") from e

    def read_addon(self, workload: str, file_name: str) -> bytes:
        return self._read(workload, ADDONS_DIR_NAME, file_name)

    def write_addon(self, workload: str, base_name: str, data: bytes) -> Path:
        """Write ``<workload>/addons/<base_name>.yml``. Never overwrites."""
        return self._write(data, workload, ADDONS_DIR_NAME, base_name + YML_FILE_EXTENSION)
