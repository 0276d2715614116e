"""Tests for the stack resolver."""

import pytest

from stackscript.ast import (
    NewfileCommand,
    PrintCommand,
    ReadCommand,
    StringLiteral,
    WriteCommand,
)
from stackscript.errors import ScriptIOError, ScriptSyntaxError
from stackscript.fs import InMemoryFs
from stackscript.parser import Resolver, resolve, tokenize


async def resolve_source(source: str, files: dict[str, str] | None = None, cwd: str = "/"):
    return await resolve(tokenize(source), InMemoryFs(files), cwd)


class TestMaterialize:
    """Test the first pass."""

    def test_stack_mirrors_source(self):
        resolver = Resolver(tokenize('"a" print\n"f" read'), InMemoryFs())
        resolver.materialize()
        assert resolver.stack == [
            StringLiteral("a", 1),
            PrintCommand(1),
            StringLiteral("f", 2),
            ReadCommand(2),
        ]

    def test_illegal_word(self):
        resolver = Resolver(tokenize('"a" echo'), InMemoryFs())
        with pytest.raises(ScriptSyntaxError) as exc_info:
            resolver.materialize()
        assert exc_info.value.message == "illegal 'echo'"
        assert exc_info.value.line == 1

    def test_illegal_character_line(self):
        with pytest.raises(ScriptSyntaxError) as exc_info:
            resolver = Resolver(tokenize('"a" print\n\n  ;'), InMemoryFs())
            resolver.materialize()
        assert exc_info.value.message == "illegal ';'"
        assert exc_info.value.line == 3


class TestReduce:
    """Test binding commands to their arguments."""

    @pytest.mark.asyncio
    async def test_print(self):
        commands = await resolve_source('"hello" print')
        assert commands == [PrintCommand(1, arg="hello")]

    @pytest.mark.asyncio
    async def test_newfile(self):
        commands = await resolve_source('"out.txt" newfile')
        assert commands == [NewfileCommand(1, filename="out.txt")]

    @pytest.mark.asyncio
    async def test_write_binds_content_then_filename(self):
        commands = await resolve_source('"out.txt" "hello" write')
        assert commands == [WriteCommand(1, content="hello", filename="out.txt")]

    @pytest.mark.asyncio
    async def test_literal_round_trip(self):
        commands = await resolve_source('"  tabs\tand spaces\\n "  print')
        assert commands[0].arg == "  tabs\tand spaces\\n "

    @pytest.mark.asyncio
    async def test_empty_program(self):
        assert await resolve_source("") == []
        assert await resolve_source("\n\n") == []

    @pytest.mark.asyncio
    async def test_commands_are_bound(self):
        commands = await resolve_source('"a" print "f" newfile "f" "c" write')
        assert all(command.is_bound for command in commands)

    @pytest.mark.asyncio
    async def test_stack_is_empty_after_reduce(self):
        resolver = Resolver(tokenize('"a" print\n"f" "x" write'), InMemoryFs())
        await resolver.resolve()
        assert resolver.stack == []


class TestReverseOrder:
    """Independent commands come out in reverse source order."""

    @pytest.mark.asyncio
    async def test_two_prints(self):
        commands = await resolve_source('"A" print\n"B" print')
        assert [c.arg for c in commands] == ["B", "A"]

    @pytest.mark.asyncio
    async def test_mixed_commands(self):
        commands = await resolve_source('"f" newfile\n"f" "x" write\n"done" print')
        assert commands == [
            PrintCommand(3, arg="done"),
            WriteCommand(2, content="x", filename="f"),
            NewfileCommand(1, filename="f"),
        ]


class TestReadExpansion:
    """Test `read` used as the argument of `print`."""

    @pytest.mark.asyncio
    async def test_read_print(self):
        commands = await resolve_source('"/in.txt" read print', {"/in.txt": "hello"})
        assert commands == [PrintCommand(1, arg="hello")]

    @pytest.mark.asyncio
    async def test_read_relative_to_cwd(self):
        commands = await resolve_source(
            '"in.txt" read print', {"/work/in.txt": "data"}, cwd="/work"
        )
        assert commands[0].arg == "data"

    @pytest.mark.asyncio
    async def test_read_across_lines(self):
        commands = await resolve_source('"/in.txt"\nread\nprint', {"/in.txt": "x"})
        assert commands == [PrintCommand(3, arg="x")]

    @pytest.mark.asyncio
    async def test_bare_read_leaves_lonely_literal(self):
        with pytest.raises(ScriptSyntaxError, match="lonely string literal 'data'"):
            await resolve_source('"/in.txt" read', {"/in.txt": "data"})

    @pytest.mark.asyncio
    async def test_read_missing_file(self):
        with pytest.raises(ScriptIOError) as exc_info:
            await resolve_source('"/nope.txt" read print')
        assert "no such file or directory" in exc_info.value.message
        assert "/nope.txt" in exc_info.value.message
        assert exc_info.value.line == 1

    @pytest.mark.asyncio
    async def test_read_directory(self):
        fs = InMemoryFs({"/dir/file.txt": "x"})
        with pytest.raises(ScriptIOError, match="illegal operation on a directory"):
            await resolve(tokenize('"/dir" read print'), fs)

    @pytest.mark.asyncio
    async def test_read_missing_filename(self):
        with pytest.raises(ScriptSyntaxError) as exc_info:
            await resolve_source("read print")
        assert exc_info.value.message == "missing file name argument for 'read'"

    @pytest.mark.asyncio
    async def test_read_invalid_filename(self):
        with pytest.raises(ScriptSyntaxError) as exc_info:
            await resolve_source('"x" newfile read print')
        assert exc_info.value.message == "invalid file name argument for 'read'"


class TestErrors:
    """Test argument errors."""

    @pytest.mark.asyncio
    async def test_print_missing_argument(self):
        with pytest.raises(ScriptSyntaxError) as exc_info:
            await resolve_source("print")
        assert exc_info.value.message == "missing argument for 'print'"
        assert exc_info.value.line == 1

    @pytest.mark.asyncio
    async def test_print_print(self):
        with pytest.raises(ScriptSyntaxError) as exc_info:
            await resolve_source("print print")
        assert exc_info.value.message == "invalid argument for 'print'"

    @pytest.mark.asyncio
    async def test_newfile_missing_argument(self):
        with pytest.raises(ScriptSyntaxError, match="missing argument for 'newfile'"):
            await resolve_source("\nnewfile")

    @pytest.mark.asyncio
    async def test_newfile_invalid_argument(self):
        with pytest.raises(ScriptSyntaxError, match="invalid argument for 'newfile'"):
            await resolve_source('"f" print newfile')

    @pytest.mark.asyncio
    async def test_write_missing_content(self):
        with pytest.raises(ScriptSyntaxError) as exc_info:
            await resolve_source("write")
        assert exc_info.value.message == "missing content argument for 'write'"

    @pytest.mark.asyncio
    async def test_write_missing_filename(self):
        with pytest.raises(ScriptSyntaxError) as exc_info:
            await resolve_source('"content" write')
        assert exc_info.value.message == "missing file name argument for 'write'"

    @pytest.mark.asyncio
    async def test_write_invalid_content(self):
        with pytest.raises(ScriptSyntaxError, match="invalid content argument for 'write'"):
            await resolve_source('"f" "x" read write')

    @pytest.mark.asyncio
    async def test_write_invalid_filename(self):
        with pytest.raises(ScriptSyntaxError, match="invalid file name argument for 'write'"):
            await resolve_source('"f" newfile "content" write')

    @pytest.mark.asyncio
    async def test_lonely_literal(self):
        with pytest.raises(ScriptSyntaxError) as exc_info:
            await resolve_source('"a" print\n"stray"')
        assert exc_info.value.message == "lonely string literal 'stray'"
        assert exc_info.value.line == 2

    @pytest.mark.asyncio
    async def test_error_line_is_command_line(self):
        with pytest.raises(ScriptSyntaxError) as exc_info:
            await resolve_source('"a" print\n\nprint print')
        assert exc_info.value.line == 3


class TestBinding:
    """Test the bind-once rule of command elements."""

    def test_bind_returns_bound_copy(self):
        unbound = PrintCommand(1)
        bound = unbound.bind(arg="x")
        assert not unbound.is_bound
        assert bound.is_bound
        assert bound.arg == "x"

    def test_bind_twice_raises(self):
        bound = WriteCommand(1).bind(content="c", filename="f")
        with pytest.raises(ValueError, match="already bound"):
            bound.bind(content="d", filename="g")
