"""Summary store — associates a workspace with exactly one application."""

from __future__ import annotations

import logging

import yaml

from ..errors import AlreadyAssociatedError, NotAssociatedError, WorkspaceIOError
from ..models import Summary
from .store import RootedStore, decode_yaml

logger = logging.getLogger(__name__)

SUMMARY_FILE_NAME = ".workspace"


class SummaryStore(RootedStore):
    """Reads and writes ``<root>/.workspace``."""

    def read(self) -> Summary:
        """Return the workspace summary.

        Raises :class:`NotAssociatedError` if the workspace was never
        initialised, so callers can tell "first run" apart from a failure.
        """
        path = self._path(SUMMARY_FILE_NAME)
        if not self.fs.exists(path):
            raise NotAssociatedError()
        try:
            data = self.fs.read_bytes(path)
        except OSError as e:
            raise WorkspaceIOError(f"read workspace summary {path}: {e}") from e
        return decode_yaml(data, Summary, path)

    def create(self, application: str) -> None:
        """Associate the workspace with *application*.

        Creates the marker directory if needed. Re-running with the same name
        is a no-op; a different name raises :class:`AlreadyAssociatedError`.
        """
        self.locator.create()
        try:
            summary = self.read()
        except NotAssociatedError:
            self._write_summary(application)
            return
        if summary.application != application:
            raise AlreadyAssociatedError(summary.application)

    def delete(self) -> None:
        """Remove the summary file only; other workspace files are kept."""
        path = self._path(SUMMARY_FILE_NAME)
        try:
            self.fs.remove(path)
        except OSError as e:
            raise WorkspaceIOError(f"remove workspace summary {path}: {e}") from e
        logger.info("Removed workspace summary %s", path)

    def _write_summary(self, application: str) -> None:
        path = self._path(SUMMARY_FILE_NAME)
        data = yaml.safe_dump(Summary(application=application).model_dump(), sort_keys=False)
        try:
            self.fs.write_bytes(path, data.encode("utf-8"))
        except OSError as e:
            raise WorkspaceIOError(f"write workspace summary {path}: {e}") from e
        logger.info("Associated workspace %s with application %s", path.parent, application)
