"""stackscript - a tiny reverse-Polish scripting language.

Scripts push string literals and end each statement with a command
keyword that consumes them: ``"hello" "out.txt" write``.
"""

from .errors import (
    ExecutionLimitError,
    LexerError,
    ScriptError,
    ScriptIOError,
    ScriptSyntaxError,
)
from .fs import InMemoryFs, ReadWriteFs
from .stack_script import StackScript
from .types import ExecResult, ExecutionLimits, IFileSystem

__version__ = "0.1.0"

__all__ = [
    "StackScript",
    "ExecResult",
    "ExecutionLimits",
    "IFileSystem",
    "InMemoryFs",
    "ReadWriteFs",
    "ScriptError",
    "LexerError",
    "ScriptSyntaxError",
    "ScriptIOError",
    "ExecutionLimitError",
]
