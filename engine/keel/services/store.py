"""Shared read/write plumbing for files that live under the marker directory."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TypeVar

import yaml
from pydantic import BaseModel, ValidationError

from ..errors import FileAlreadyExistsError, ManifestDecodeError, WorkspaceIOError
from ..fs import FileSystem
from .locator import RootLocator

logger = logging.getLogger(__name__)


ModelT = TypeVar("ModelT", bound=BaseModel)


def decode_yaml(data: bytes, model: type[ModelT], path: Path) -> ModelT:
    """Decode the first YAML document in *data* into *model*.

    Only the fields the model declares are kept; later documents are never
    parsed. An empty document decodes to the model's defaults. Anything that
    is not a YAML mapping, or whose declared fields hold a mapping or a
    sequence, raises :class:`ManifestDecodeError`.
    """
    try:
        raw = next(iter(yaml.safe_load_all(data)), None)
    except yaml.YAMLError as e:
        raise ManifestDecodeError(path, str(e)) from e
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ManifestDecodeError(path, f"expected a mapping, got {type(raw).__name__}")
    try:
        return model.model_validate(raw)
    except ValidationError as e:
        raise ManifestDecodeError(path, str(e)) from e


class RootedStore:
    """Base for stores that address files relative to the marker directory.

    The root is resolved through the locator on every call; the locator caches
    it, the store does not.
    """

    def __init__(self, locator: RootLocator, fs: FileSystem) -> None:
        self.locator = locator
        self.fs = fs

    def _path(self, *elems: str) -> Path:
        return self.locator.locate().joinpath(*elems)

    def _read(self, *elems: str) -> bytes:
        return self.fs.read_bytes(self._path(*elems))

    def _write(self, data: bytes, *elems: str) -> Path:
        """Write *data* to a new file under the root. Never overwrites.

        Missing parent directories are created first. If the target already
        exists, :class:`FileAlreadyExistsError` is raised and the file is left
        untouched.
        """
        filename = self._path(*elems)
        try:
            self.fs.make_dirs(filename.parent)
        except OSError as e:
            raise WorkspaceIOError(f"create directories for file {filename}: {e}") from e
        if self.fs.exists(filename):
            raise FileAlreadyExistsError(filename)
        try:
            self.fs.write_bytes(filename, data)
        except OSError as e:
            raise WorkspaceIOError(f"write file {filename}: {e}") from e
        logger.debug("Wrote %d bytes to %s", len(data), filename)
        return filename
