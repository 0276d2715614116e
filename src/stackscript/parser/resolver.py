"""Stack resolver for stackscript.

Turns the token stream into bound commands in two passes over one stack:

1. Materialize: push a StringLiteral for every string token and an
   unbound command element for every keyword, in source order.
2. Reduce: pop until the stack is empty. A popped command takes its
   arguments from the elements directly below it and is appended to the
   output once bound.

A ``read`` is never emitted. When popped it reads its file and pushes the
contents back as a StringLiteral, so it can serve as the argument of the
command above it.

Because the output is appended in pop order, independent commands come
out in the reverse of their source order: ``"a" print "b" print`` prints
``b`` and then ``a``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import assert_never

from ..ast.types import (
    Command,
    Element,
    NewfileCommand,
    PrintCommand,
    ReadCommand,
    StringLiteral,
    WriteCommand,
)
from ..errors import ScriptIOError, ScriptSyntaxError
from ..types import IFileSystem
from .lexer import Token, TokenType

logger = logging.getLogger(__name__)

# Commands that can stand in for a literal when popped as an argument
EXPANDABLE = (ReadCommand,)


class Resolver:
    """Resolves a token stream into a list of bound commands."""

    def __init__(self, tokens: Iterable[Token], fs: IFileSystem, cwd: str = "/"):
        self.tokens = tokens
        self.fs = fs
        self.cwd = cwd
        self.stack: list[Element] = []

    def push(self, element: Element) -> None:
        self.stack.append(element)

    def pop(self) -> Element | None:
        """Pop the top element, or return None if the stack is empty."""
        if self.stack:
            return self.stack.pop()
        return None

    async def resolve(self) -> list[Command]:
        """Run both passes and return the bound commands."""
        self.materialize()
        commands = await self.reduce()
        logger.debug("resolved %d command(s)", len(commands))
        return commands

    def materialize(self) -> None:
        """First pass: push every token onto the stack as an element."""
        for token in self.tokens:
            if token.type == TokenType.EOF:
                break
            elif token.type == TokenType.ILLEGAL:
                raise ScriptSyntaxError(f"illegal '{token.value}'", token.line)
            elif token.type == TokenType.NEWLINE:
                continue
            elif token.type == TokenType.STRING:
                self.push(StringLiteral(token.value, token.line))
            elif token.type == TokenType.PRINT:
                self.push(PrintCommand(token.line))
            elif token.type == TokenType.NEWFILE:
                self.push(NewfileCommand(token.line))
            elif token.type == TokenType.WRITE:
                self.push(WriteCommand(token.line))
            elif token.type == TokenType.READ:
                self.push(ReadCommand(token.line))
            else:
                assert_never(token.type)

    async def reduce(self) -> list[Command]:
        """Second pass: pop the stack into bound commands."""
        commands: list[Command] = []
        while (element := self.pop()) is not None:
            if isinstance(element, ReadCommand):
                await self.expand_read(element)
            elif isinstance(element, PrintCommand):
                arg = await self.pop_expanded("print")
                commands.append(element.bind(arg=self.require_literal(arg, element, "argument")))
            elif isinstance(element, NewfileCommand):
                filename = self.pop_operand(element, "argument")
                commands.append(element.bind(filename=filename))
            elif isinstance(element, WriteCommand):
                content = self.pop_operand(element, "content argument")
                filename = self.pop_operand(element, "file name argument")
                commands.append(element.bind(content=content, filename=filename))
            elif isinstance(element, StringLiteral):
                raise ScriptSyntaxError(f"lonely string literal '{element.text}'", element.line)
            else:
                assert_never(element)
        return commands

    async def pop_expanded(self, name: str) -> Element | None:
        """Pop an argument, expanding it in place if it is a ``read``."""
        element = self.pop()
        if element is None:
            return None
        if isinstance(element, EXPANDABLE):
            await self.expand_read(element)
            element = self.pop()
            logger.debug("expanded 'read' as argument of '%s'", name)
        return element

    def pop_operand(self, command, what: str) -> str:
        """Pop one argument and require it to be a string literal."""
        return self.require_literal(self.pop(), command, what)

    @staticmethod
    def require_literal(element: Element | None, command, what: str) -> str:
        if element is None:
            raise ScriptSyntaxError(f"missing {what} for '{command.name}'", command.line)
        if not isinstance(element, StringLiteral):
            raise ScriptSyntaxError(f"invalid {what} for '{command.name}'", command.line)
        return element.text

    async def expand_read(self, command: ReadCommand) -> None:
        """Read the file named below ``command`` and push its contents."""
        filename = self.pop_operand(command, "file name argument")
        path = self.fs.resolve_path(self.cwd, filename)
        try:
            contents = await self.fs.read_file(path)
        except OSError as e:
            raise ScriptIOError(str(e), command.line) from e
        logger.debug("read %d character(s) from %s", len(contents), path)
        self.push(StringLiteral(contents, command.line))


async def resolve(tokens: Iterable[Token], fs: IFileSystem, cwd: str = "/") -> list[Command]:
    """Convenience function to resolve a token stream."""
    return await Resolver(tokens, fs, cwd).resolve()
