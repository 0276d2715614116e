"""Interpreter - command execution engine.

Runs the bound commands produced by the resolver, in the order the
resolver produced them. Printed text is collected into the result's
stdout. The first failing command stops the run; files written by
earlier commands stay written.
"""

import logging
from typing import assert_never

from ..ast.types import Command, NewfileCommand, PrintCommand, WriteCommand
from ..errors import ExecutionLimitError, ScriptError, ScriptIOError
from ..types import ExecResult, ExecutionLimits, IFileSystem

logger = logging.getLogger(__name__)


class Interpreter:
    """Executes resolved stackscript commands."""

    def __init__(
        self,
        fs: IFileSystem,
        limits: ExecutionLimits,
        cwd: str = "/",
    ):
        """Initialize the interpreter.

        Args:
            fs: Filesystem interface
            limits: Execution limits
            cwd: Directory relative file names are resolved against
        """
        self._fs = fs
        self._limits = limits
        self._cwd = cwd
        self._command_count = 0

    @property
    def command_count(self) -> int:
        """Number of commands executed so far."""
        return self._command_count

    async def execute(self, commands: list[Command]) -> ExecResult:
        """Execute commands in order and collect their output."""
        stdout = ""
        for command in commands:
            try:
                stdout += await self.execute_command(command)
            except ScriptError as error:
                error.prepend_output(stdout, "")
                raise
        return ExecResult(stdout=stdout, stderr="", exit_code=0)

    async def execute_command(self, command: Command) -> str:
        """Execute a single command, returning the text it prints."""
        self._command_count += 1
        if self._command_count > self._limits.max_command_count:
            raise ExecutionLimitError(
                f"too many commands executed (>{self._limits.max_command_count}), "
                "increase execution_limits.max_command_count",
                "commands",
                command.line,
            )

        if isinstance(command, PrintCommand):
            logger.debug("line %d: print %r", command.line, command.arg)
            return f"{command.arg}\n"
        elif isinstance(command, WriteCommand):
            await self._write(command.filename, command.content, command.line)
            return ""
        elif isinstance(command, NewfileCommand):
            await self._write(command.filename, "", command.line)
            return ""
        else:
            assert_never(command)

    async def _write(self, filename: str | None, content: str | None, line: int) -> None:
        if filename is None or content is None:
            raise ValueError(f"unbound command at line {line}")
        path = self._fs.resolve_path(self._cwd, filename)
        try:
            await self._fs.write_file(path, content)
        except OSError as e:
            raise ScriptIOError(str(e), line) from e
        logger.debug("line %d: wrote %d character(s) to %s", line, len(content), path)
