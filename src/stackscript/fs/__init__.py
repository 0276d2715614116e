"""Filesystem implementations for stackscript."""

from .in_memory_fs import (
    InMemoryFs,
    FileEntry,
    DirectoryEntry,
    FsEntry,
    normalize_path,
)
from .read_write_fs import ReadWriteFs

__all__ = [
    "InMemoryFs",
    "FileEntry",
    "DirectoryEntry",
    "FsEntry",
    "ReadWriteFs",
    "normalize_path",
]
