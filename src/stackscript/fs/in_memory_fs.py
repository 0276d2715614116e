"""In-memory filesystem.

A virtual tree of directories and text files. Writing a file creates any
missing parent directories.
"""

from __future__ import annotations

import posixpath
from dataclasses import dataclass, field


@dataclass
class FileEntry:
    """A regular file."""

    content: str = ""


@dataclass
class DirectoryEntry:
    """A directory."""

    children: set[str] = field(default_factory=set)


FsEntry = FileEntry | DirectoryEntry


def normalize_path(path: str) -> str:
    """Normalize an absolute path, collapsing '.', '..' and repeated slashes."""
    normalized = posixpath.normpath("/" + path.lstrip("/"))
    # normpath keeps a leading '//' pair
    return "/" + normalized.lstrip("/")


class InMemoryFs:
    """Filesystem held entirely in memory."""

    def __init__(self, initial_files: dict[str, str] | None = None):
        self._entries: dict[str, FsEntry] = {"/": DirectoryEntry()}
        for path, content in (initial_files or {}).items():
            self._write_sync(normalize_path(path), content)

    def resolve_path(self, base: str, path: str) -> str:
        if path.startswith("/"):
            return normalize_path(path)
        return normalize_path(posixpath.join(base, path))

    def _ensure_dir(self, path: str) -> None:
        entry = self._entries.get(path)
        if isinstance(entry, DirectoryEntry):
            return
        if entry is not None:
            raise NotADirectoryError(f"ENOTDIR: not a directory, mkdir '{path}'")
        parent = posixpath.dirname(path)
        self._ensure_dir(parent)
        self._entries[path] = DirectoryEntry()
        self._parent(path).children.add(posixpath.basename(path))

    def _parent(self, path: str) -> DirectoryEntry:
        parent = posixpath.dirname(path)
        entry = self._entries.get(parent)
        if not isinstance(entry, DirectoryEntry):
            raise NotADirectoryError(f"ENOTDIR: not a directory, open '{parent}'")
        return entry

    def _write_sync(self, path: str, content: str) -> None:
        if isinstance(self._entries.get(path), DirectoryEntry):
            raise IsADirectoryError(f"EISDIR: illegal operation on a directory, open '{path}'")
        self._ensure_dir(posixpath.dirname(path))
        self._entries[path] = FileEntry(content)
        self._parent(path).children.add(posixpath.basename(path))

    async def read_file(self, path: str) -> str:
        path = normalize_path(path)
        entry = self._entries.get(path)
        if entry is None:
            raise FileNotFoundError(f"ENOENT: no such file or directory, open '{path}'")
        if isinstance(entry, DirectoryEntry):
            raise IsADirectoryError(f"EISDIR: illegal operation on a directory, read '{path}'")
        return entry.content

    async def write_file(self, path: str, content: str) -> None:
        self._write_sync(normalize_path(path), content)

    async def exists(self, path: str) -> bool:
        return normalize_path(path) in self._entries

    async def mkdir(self, path: str) -> None:
        """Create a directory and any missing parents."""
        self._ensure_dir(normalize_path(path))

    async def readdir(self, path: str) -> list[str]:
        """List the names in a directory."""
        path = normalize_path(path)
        entry = self._entries.get(path)
        if entry is None:
            raise FileNotFoundError(f"ENOENT: no such file or directory, scandir '{path}'")
        if not isinstance(entry, DirectoryEntry):
            raise NotADirectoryError(f"ENOTDIR: not a directory, scandir '{path}'")
        return sorted(entry.children)
