"""Core types shared across stackscript."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass
class ExecResult:
    """Result of running a script."""

    stdout: str = ""
    """Text printed by the script."""

    stderr: str = ""
    """Error report, empty on success."""

    exit_code: int = 0
    """0 on success, the error's exit code otherwise."""


@dataclass
class ExecutionLimits:
    """Resource limits applied to a single run."""

    max_input_size: int = 1_000_000
    """Maximum number of characters of source text."""

    max_tokens: int = 100_000
    """Maximum number of tokens the scanner may produce."""

    max_command_count: int = 10_000
    """Maximum number of resolved commands the interpreter will execute."""


@runtime_checkable
class IFileSystem(Protocol):
    """Whole-file access used by the resolver and interpreter."""

    async def read_file(self, path: str) -> str:
        """Read a whole file as text.

        Raises:
            FileNotFoundError: If the file does not exist.
            IsADirectoryError: If the path names a directory.
        """
        ...

    async def write_file(self, path: str, content: str) -> None:
        """Write text to a file, creating it or replacing its content."""
        ...

    async def exists(self, path: str) -> bool:
        """Check whether a path exists."""
        ...

    def resolve_path(self, base: str, path: str) -> str:
        """Resolve a possibly relative path against a base directory."""
        ...
