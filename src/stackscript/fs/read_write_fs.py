"""Disk-backed filesystem.

Virtual absolute paths are mapped below a real root directory, so a
script run with root ``/tmp/work`` that writes ``/out.txt`` creates
``/tmp/work/out.txt``. Paths that would leave the root are rejected.
"""

from __future__ import annotations

import os
from pathlib import Path

from .in_memory_fs import normalize_path


class ReadWriteFs:
    """Filesystem that reads and writes real files under ``root``."""

    def __init__(self, root: str | os.PathLike[str]):
        self.root = Path(root).resolve()
        if not self.root.is_dir():
            raise NotADirectoryError(f"ENOTDIR: not a directory, '{root}'")

    def resolve_path(self, base: str, path: str) -> str:
        if path.startswith("/"):
            return normalize_path(path)
        return normalize_path(f"{base}/{path}")

    def to_real_path(self, path: str) -> Path:
        """Map a virtual path to a path on disk inside the root."""
        if "\0" in path:
            shown = path.replace("\0", "\\0")
            raise OSError(f"EINVAL: invalid argument, open '{shown}'")
        real = (self.root / normalize_path(path).lstrip("/")).resolve()
        if real != self.root and self.root not in real.parents:
            raise PermissionError(f"EACCES: path escapes the filesystem root, '{path}'")
        return real

    async def read_file(self, path: str) -> str:
        real = self.to_real_path(path)
        try:
            with open(real, "r", encoding="utf-8", newline="") as f:
                return f.read()
        except FileNotFoundError:
            raise FileNotFoundError(
                f"ENOENT: no such file or directory, open '{normalize_path(path)}'"
            ) from None
        except IsADirectoryError:
            raise IsADirectoryError(
                f"EISDIR: illegal operation on a directory, read '{normalize_path(path)}'"
            ) from None
        except UnicodeDecodeError:
            raise OSError(
                f"EIO: file is not valid UTF-8 text, read '{normalize_path(path)}'"
            ) from None

    async def write_file(self, path: str, content: str) -> None:
        real = self.to_real_path(path)
        real.parent.mkdir(parents=True, exist_ok=True)
        try:
            with open(real, "w", encoding="utf-8", newline="") as f:
                f.write(content)
        except IsADirectoryError:
            raise IsADirectoryError(
                f"EISDIR: illegal operation on a directory, open '{normalize_path(path)}'"
            ) from None

    async def exists(self, path: str) -> bool:
        try:
            return self.to_real_path(path).exists()
        except OSError:
            return False
