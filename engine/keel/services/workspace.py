"""Workspace — one invocation directory wired to its root locator and stores.

The typical workspace::

    .
    ├── copilot                  (marker directory)
    │   ├── .workspace           (summary)
    │   ├── my-service
    │   │   ├── manifest.yml
    │   │   └── addons/
    │   ├── buildspec.yml
    │   └── pipeline.yml
    └── my-service-src
        └── Dockerfile
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from ..fs import FileSystem, OSFileSystem
from ..models import Summary
from .addons import AddonStore
from .dockerfiles import BuildInputScanner
from .locator import RootLocator, is_in_git_repository
from .manifests import ManifestStore
from .summary import SummaryStore


class Workspace:
    """All workspace services for a single working directory.

    Every store shares one :class:`RootLocator`, so the marker directory is
    searched for at most once per workspace.
    """

    def __init__(self, working_dir: Optional[Path] = None, fs: Optional[FileSystem] = None) -> None:
        self.working_dir = Path(working_dir) if working_dir is not None else Path.cwd()
        self.fs = fs or OSFileSystem()
        self.locator = RootLocator(self.working_dir, self.fs)
        self.summaries = SummaryStore(self.locator, self.fs)
        self.manifests = ManifestStore(self.locator, self.fs)
        self.addons = AddonStore(self.locator, self.fs)
        self.dockerfiles = BuildInputScanner(self.working_dir, self.fs)

    @property
    def root(self) -> Path:
        return self.locator.locate()

    def create(self, application: str) -> None:
        self.summaries.create(application)

    def summary(self) -> Summary:
        return self.summaries.read()

    def is_in_git_repository(self) -> bool:
        return is_in_git_repository(self.fs, self.working_dir)
