"""Error types for stackscript.

Every error is fatal: the scanner, resolver and interpreter raise one of
these and the run stops. ``StackScript.exec`` is the only place that catches
them and turns them into an ``ExecResult``.
"""


class ScriptError(Exception):
    """Base class for all fatal script errors."""

    exit_code = 1

    def __init__(self, message: str, line: int = 0):
        super().__init__(message)
        self.message = message
        self.line = line
        self.stdout = ""
        self.stderr = ""

    def prepend_output(self, stdout: str, stderr: str) -> None:
        """Prepend output produced before the error was raised."""
        self.stdout = stdout + self.stdout
        self.stderr = stderr + self.stderr

    def __str__(self) -> str:
        if self.line:
            return f"line {self.line}: {self.message}"
        return self.message


class LexerError(ScriptError):
    """Raised when the source text cannot be tokenized."""

    exit_code = 2


class ScriptSyntaxError(ScriptError):
    """Raised for illegal tokens and badly formed command arguments."""

    exit_code = 2


class ScriptIOError(ScriptError):
    """Raised when reading or writing a file fails."""

    exit_code = 1


class ExecutionLimitError(ScriptError):
    """Raised when a configured execution limit is exceeded."""

    exit_code = 126

    def __init__(self, message: str, limit_type: str, line: int = 0):
        super().__init__(message, line)
        self.limit_type = limit_type
