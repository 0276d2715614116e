"""Stack elements for stackscript.

The resolver works on a closed set of element types. A string literal is
a resolved value; every other element is a command. Commands are pushed
unbound (argument fields are ``None``) and are bound exactly once, when
the resolver pops them and takes their arguments from the stack.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Union


@dataclass(frozen=True)
class StringLiteral:
    """A resolved text value."""

    text: str
    line: int


@dataclass(frozen=True)
class _CommandBase:
    """Shared behaviour of command elements."""

    line: int

    name = ""
    """Keyword that introduces the command."""

    @property
    def is_bound(self) -> bool:
        """Whether every argument field has been filled."""
        return all(
            getattr(self, f.name) is not None for f in fields(self) if f.name != "line"
        )

    def bind(self, **arguments: str):
        """Return a bound copy of this command.

        Raises:
            ValueError: If the command is already bound.
        """
        if self.is_bound:
            raise ValueError(f"'{self.name}' command at line {self.line} is already bound")
        return replace(self, **arguments)


@dataclass(frozen=True)
class PrintCommand(_CommandBase):
    """Print ``arg`` followed by a newline."""

    arg: str | None = None

    name = "print"


@dataclass(frozen=True)
class NewfileCommand(_CommandBase):
    """Create ``filename`` as an empty file."""

    filename: str | None = None

    name = "newfile"


@dataclass(frozen=True)
class WriteCommand(_CommandBase):
    """Write ``content`` to ``filename``."""

    content: str | None = None
    filename: str | None = None

    name = "write"


@dataclass(frozen=True)
class ReadCommand(_CommandBase):
    """Read ``filename``; always expanded into a StringLiteral."""

    filename: str | None = None

    name = "read"


CommandElement = Union[PrintCommand, NewfileCommand, WriteCommand, ReadCommand]
"""A command element, bound or not."""

Element = Union[StringLiteral, PrintCommand, NewfileCommand, WriteCommand, ReadCommand]
"""Anything that can live on the resolver stack."""

Command = Union[PrintCommand, NewfileCommand, WriteCommand]
"""A bound command the interpreter can execute."""
