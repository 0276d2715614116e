"""Stack element types for stackscript."""

from .types import (
    Command,
    CommandElement,
    Element,
    NewfileCommand,
    PrintCommand,
    ReadCommand,
    StringLiteral,
    WriteCommand,
)

__all__ = [
    "Command",
    "CommandElement",
    "Element",
    "NewfileCommand",
    "PrintCommand",
    "ReadCommand",
    "StringLiteral",
    "WriteCommand",
]
