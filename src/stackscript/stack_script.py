"""Main StackScript class - the primary API for stackscript.

Example usage:
    from stackscript import StackScript

    # Synchronous usage (for REPL, scripts)
    script = StackScript()
    result = script.run('"hello world" print')
    print(result.stdout)  # "hello world\\n"

    # Async usage (for async applications)
    script = StackScript()
    result = await script.exec('"hello world" print')

    # With initial files
    script = StackScript(files={"/data.txt": "hello"})
    result = script.run('"/data.txt" read print')

    # With execution limits
    script = StackScript(limits=ExecutionLimits(max_command_count=100))
"""

import asyncio
import logging
from typing import Optional

import nest_asyncio  # type: ignore[import-untyped]

from .ast.types import Command
from .errors import ScriptError
from .fs import InMemoryFs
from .interpreter import Interpreter
from .parser import Resolver, Token, tokenize
from .types import ExecResult, ExecutionLimits, IFileSystem

logger = logging.getLogger(__name__)


class StackScript:
    """Main stackscript interpreter class.

    Runs scripts against a filesystem, by default an in-memory one.
    """

    def __init__(
        self,
        *,
        fs: Optional[IFileSystem] = None,
        files: Optional[dict[str, str]] = None,
        cwd: str = "/",
        limits: Optional[ExecutionLimits] = None,
    ):
        """Initialize the interpreter.

        Args:
            fs: Filesystem to use. If not provided, creates an InMemoryFs.
            files: Initial files to create (requires default InMemoryFs).
            cwd: Directory relative file names are resolved against.
            limits: Execution limits.
        """
        if fs is not None:
            if files:
                raise ValueError("files can only be used with the default InMemoryFs")
            self._fs = fs
        else:
            self._fs = InMemoryFs(initial_files=files or {})

        self._cwd = cwd
        self._limits = limits or ExecutionLimits()

    @property
    def fs(self) -> IFileSystem:
        """Get the filesystem."""
        return self._fs

    @property
    def cwd(self) -> str:
        """Get the working directory."""
        return self._cwd

    def tokenize(self, source: str) -> list[Token]:
        """Tokenize source text using this instance's limits."""
        return tokenize(
            source,
            max_input_size=self._limits.max_input_size,
            max_tokens=self._limits.max_tokens,
        )

    async def resolve(self, source: str) -> list[Command]:
        """Tokenize and resolve source text into bound commands.

        Note that resolving performs the reads the script asks for.
        """
        tokens = self.tokenize(source)
        logger.debug("scanned %d token(s)", len(tokens))
        return await Resolver(tokens, self._fs, self._cwd).resolve()

    async def exec(self, source: str) -> ExecResult:
        """Execute a script.

        Args:
            source: The script to execute.

        Returns:
            ExecResult with stdout, stderr and exit_code. Errors are
            reported in stderr as ``stackscript: line N: message``.
        """
        try:
            commands = await self.resolve(source)
            interpreter = Interpreter(fs=self._fs, limits=self._limits, cwd=self._cwd)
            return await interpreter.execute(commands)
        except ScriptError as error:
            logger.debug("run failed: %s", error)
            return ExecResult(
                stdout=error.stdout,
                stderr=f"{error.stderr}stackscript: {error}\n",
                exit_code=error.exit_code,
            )

    def run(self, source: str) -> ExecResult:
        """Execute a script synchronously.

        This is a convenience wrapper around exec() that works in any context,
        including Jupyter notebooks and async frameworks.

        Example:
            >>> script = StackScript()
            >>> result = script.run('"Hello, World!" print')
            >>> print(result.stdout)
            Hello, World!
            <BLANKLINE>
        """
        try:
            asyncio.get_running_loop()
            # Inside a running event loop; allow asyncio.run() to nest
            nest_asyncio.apply()
        except RuntimeError:
            pass
        return asyncio.run(self.exec(source))
