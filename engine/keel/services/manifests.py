"""Manifest store — workload and pipeline manifests under the marker directory.

Layout::

    <root>/<workload>/manifest.yml
    <root>/pipeline.yml
    <root>/buildspec.yml

Manifests are never overwritten: regenerating one that a user may have
hand-edited raises :class:`FileAlreadyExistsError` instead.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from ..errors import NoPipelineError, WorkspaceIOError
from ..models import WorkloadTypeProbe, is_job, is_service
from .store import RootedStore, decode_yaml

logger = logging.getLogger(__name__)

MANIFEST_FILE_NAME = "manifest.yml"
PIPELINE_FILE_NAME = "pipeline.yml"
BUILDSPEC_FILE_NAME = "buildspec.yml"


class ManifestStore(RootedStore):
    """Reads, writes and classifies workload manifests."""

    # -- Workload manifests --------------------------------------------------

    def read_manifest(self, name: str) -> bytes:
        """Return the raw contents of ``<root>/<name>/manifest.yml``."""
        return self._read(name, MANIFEST_FILE_NAME)

    def read_service_manifest(self, name: str) -> bytes:
        try:
            return self.read_manifest(name)
        except OSError as e:
            raise WorkspaceIOError(f"read service {name} manifest file: {e}") from e

    def read_job_manifest(self, name: str) -> bytes:
        try:
            return self.read_manifest(name)
        except OSError as e:
            raise WorkspaceIOError(f"read job {name} manifest file: {e}") from e

    def write_manifest(self, name: str, data: bytes) -> Path:
        """Write a new workload manifest and return its path."""
        return self._write(data, name, MANIFEST_FILE_NAME)

    # -- Enumeration ---------------------------------------------------------

    def enumerate_names(self, match: Callable[[str], bool]) -> list[str]:
        """Return the workloads whose manifest ``type`` satisfies *match*.

        Subdirectories without a readable manifest are not workloads and are
        skipped. A manifest that exists but can't be decoded is an error.
        Names come back in directory listing order.
        """
        root = self.locator.locate()
        try:
            entries = self.fs.list_dir(root)
        except OSError as e:
            raise WorkspaceIOError(f"read directory {root}: {e}") from e

        names: list[str] = []
        for entry in entries:
            if not entry.is_dir:
                continue
            manifest_path = root / entry.name / MANIFEST_FILE_NAME
            if not self.fs.is_file(manifest_path):
                logger.debug("Skipping %s: no %s", entry.name, MANIFEST_FILE_NAME)
                continue
            try:
                data = self.read_manifest(entry.name)
            except OSError as e:
                raise WorkspaceIOError(f"read manifest for workload {entry.name}: {e}") from e
            probe = decode_yaml(data, WorkloadTypeProbe, manifest_path)
            if match(probe.type):
                names.append(entry.name)
        return names

    def service_names(self) -> list[str]:
        return self.enumerate_names(is_service)

    def job_names(self) -> list[str]:
        return self.enumerate_names(is_job)

    # -- Pipeline ------------------------------------------------------------

    def read_pipeline_manifest(self) -> bytes:
        """Return ``<root>/pipeline.yml``; :class:`NoPipelineError` if absent."""
        path = self._path(PIPELINE_FILE_NAME)
        if not self.fs.exists(path):
            raise NoPipelineError()
        return self._read(PIPELINE_FILE_NAME)

    def write_pipeline_manifest(self, data: bytes) -> Path:
        return self._write(data, PIPELINE_FILE_NAME)

    def write_pipeline_buildspec(self, data: bytes) -> Path:
        return self._write(data, BUILDSPEC_FILE_NAME)
