"""Filesystem capability used by the workspace services.

Services never touch ``os`` or ``pathlib`` I/O directly; they go through a
:class:`FileSystem` so that tests can swap in :class:`MemoryFileSystem`.
"""

from __future__ import annotations

import errno
import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path, PurePath


@dataclass(frozen=True)
class FileInfo:
    """A single directory entry."""

    name: str
    is_dir: bool


class FileSystem(ABC):
    """Interface for the filesystem primitives the workspace relies on.

    ``exists``, ``is_dir`` and ``is_file`` never raise: any OS error (missing
    path, no permission) reads as "not there". Everything else raises the
    builtin ``OSError`` subclasses.
    """

    @abstractmethod
    def exists(self, path: PurePath) -> bool:
        ...

    @abstractmethod
    def is_dir(self, path: PurePath) -> bool:
        ...

    @abstractmethod
    def is_file(self, path: PurePath) -> bool:
        ...

    @abstractmethod
    def read_bytes(self, path: PurePath) -> bytes:
        ...

    @abstractmethod
    def write_bytes(self, path: PurePath, data: bytes) -> None:
        """Create or truncate *path* and write *data* to it."""
        ...

    @abstractmethod
    def make_dirs(self, path: PurePath) -> None:
        """Create *path* and any missing parents. Existing directories are fine."""
        ...

    @abstractmethod
    def list_dir(self, path: PurePath) -> list[FileInfo]:
        """Return the entries of *path* sorted by name."""
        ...

    @abstractmethod
    def remove(self, path: PurePath) -> None:
        """Remove a file or an empty directory."""
        ...


class OSFileSystem(FileSystem):
    """The real disk."""

    def exists(self, path: PurePath) -> bool:
        return os.path.exists(path)

    def is_dir(self, path: PurePath) -> bool:
        return os.path.isdir(path)

    def is_file(self, path: PurePath) -> bool:
        return os.path.isfile(path)

    def read_bytes(self, path: PurePath) -> bytes:
        return Path(path).read_bytes()

    def write_bytes(self, path: PurePath, data: bytes) -> None:
        Path(path).write_bytes(data)

    def make_dirs(self, path: PurePath) -> None:
        Path(path).mkdir(mode=0o755, parents=True, exist_ok=True)

    def list_dir(self, path: PurePath) -> list[FileInfo]:
        with os.scandir(path) as it:
            entries = [FileInfo(name=e.name, is_dir=e.is_dir()) for e in it]
        return sorted(entries, key=lambda e: e.name)

    def remove(self, path: PurePath) -> None:
        p = Path(path)
        if p.is_dir() and not p.is_symlink():
            p.rmdir()
        else:
            p.unlink()


class MemoryFileSystem(FileSystem):
    """Dict-backed filesystem for tests.

    Paths are treated as absolute POSIX paths. Like a real disk, a file can
    only be written once its parent directory exists.
    """

    def __init__(self) -> None:
        self._files: dict[str, bytes] = {}
        self._dirs: set[str] = {"/"}

    @staticmethod
    def _key(path: PurePath | str) -> str:
        return os.path.normpath(str(path)).replace(os.sep, "/")

    @staticmethod
    def _error(code: int, path: PurePath | str) -> OSError:
        exc_type = {
            errno.ENOENT: FileNotFoundError,
            errno.EEXIST: FileExistsError,
            errno.ENOTDIR: NotADirectoryError,
            errno.EISDIR: IsADirectoryError,
            errno.ENOTEMPTY: OSError,
        }[code]
        return exc_type(code, os.strerror(code), str(path))

    def _parent(self, key: str) -> str:
        return os.path.dirname(key) or "/"

    # -- stat ----------------------------------------------------------------

    def exists(self, path: PurePath) -> bool:
        key = self._key(path)
        return key in self._files or key in self._dirs

    def is_dir(self, path: PurePath) -> bool:
        return self._key(path) in self._dirs

    def is_file(self, path: PurePath) -> bool:
        return self._key(path) in self._files

    # -- read/write ----------------------------------------------------------

    def read_bytes(self, path: PurePath) -> bytes:
        key = self._key(path)
        if key in self._dirs:
            raise self._error(errno.EISDIR, path)
        if key not in self._files:
            raise self._error(errno.ENOENT, path)
        return self._files[key]

    def write_bytes(self, path: PurePath, data: bytes) -> None:
        key = self._key(path)
        if key in self._dirs:
            raise self._error(errno.EISDIR, path)
        parent = self._parent(key)
        if parent in self._files:
            raise self._error(errno.ENOTDIR, path)
        if parent not in self._dirs:
            raise self._error(errno.ENOENT, path)
        self._files[key] = bytes(data)

    def make_dirs(self, path: PurePath) -> None:
        key = self._key(path)
        missing = []
        while key not in self._dirs:
            if key in self._files:
                raise self._error(errno.ENOTDIR, path)
            missing.append(key)
            key = self._parent(key)
        self._dirs.update(missing)

    # -- listing -------------------------------------------------------------

    def list_dir(self, path: PurePath) -> list[FileInfo]:
        key = self._key(path)
        if key in self._files:
            raise self._error(errno.ENOTDIR, path)
        if key not in self._dirs:
            raise self._error(errno.ENOENT, path)
        entries = [
            FileInfo(name=os.path.basename(d), is_dir=True)
            for d in self._dirs
            if d != key and self._parent(d) == key
        ]
        entries += [
            FileInfo(name=os.path.basename(f), is_dir=False)
            for f in self._files
            if self._parent(f) == key
        ]
        return sorted(entries, key=lambda e: e.name)

    def remove(self, path: PurePath) -> None:
        key = self._key(path)
        if key in self._files:
            del self._files[key]
            return
        if key not in self._dirs:
            raise self._error(errno.ENOENT, path)
        if any(self._parent(p) == key for p in (*self._files, *self._dirs) if p != key):
            raise self._error(errno.ENOTEMPTY, path)
        self._dirs.discard(key)
