"""Lexer for stackscript.

Tokenizes source text into a flat token stream:
- keywords: print, newfile, write, read
- string literals in double quotes, taken verbatim (no escapes)
- line breaks, which are tokens of their own
- anything else is an ILLEGAL token and is rejected by the resolver
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum, auto

from ..errors import LexerError

# Resource limits
MAX_INPUT_SIZE = 1_000_000
MAX_TOKENS = 100_000

# Horizontal whitespace skipped between tokens
WHITESPACE = frozenset("\t\r ")


class TokenType(Enum):
    """Token types for stackscript."""

    EOF = auto()
    NEWLINE = auto()
    ILLEGAL = auto()
    STRING = auto()

    # Command keywords
    PRINT = auto()
    NEWFILE = auto()
    WRITE = auto()
    READ = auto()

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    TokenType.EOF: "EndOfFile",
    TokenType.NEWLINE: "Newline",
    TokenType.ILLEGAL: "Illegal",
    TokenType.STRING: "String",
    TokenType.PRINT: "Print",
    TokenType.NEWFILE: "Newfile",
    TokenType.WRITE: "Write",
    TokenType.READ: "Read",
}

KEYWORDS: dict[str, TokenType] = {
    "print": TokenType.PRINT,
    "newfile": TokenType.NEWFILE,
    "write": TokenType.WRITE,
    "read": TokenType.READ,
}


@dataclass(frozen=True)
class Token:
    """A lexical token."""

    type: TokenType
    value: str
    line: int

    def __str__(self) -> str:
        return f"({self.type.display_name}, {self.value})"


def is_letter(char: str) -> bool:
    """Check for an ASCII letter."""
    return "a" <= char <= "z" or "A" <= char <= "Z"


class Lexer:
    """Lexer for stackscript source text."""

    def __init__(
        self,
        source: str,
        max_input_size: int = MAX_INPUT_SIZE,
        max_tokens: int = MAX_TOKENS,
    ):
        if len(source) > max_input_size:
            raise LexerError(
                f"input too large: {len(source)} characters exceeds the limit of {max_input_size}"
            )
        self.source = source
        self.pos = 0
        self.line = 1
        self.max_tokens = max_tokens

    def _peek(self) -> str:
        if self.pos < len(self.source):
            return self.source[self.pos]
        return ""

    def _advance(self) -> str:
        char = self.source[self.pos]
        self.pos += 1
        return char

    def tokens(self) -> Iterator[Token]:
        """Yield tokens lazily, ending with a single EOF token."""
        count = 0
        while True:
            token = self.next_token()
            count += 1
            if count > self.max_tokens:
                raise LexerError(
                    f"too many tokens (>{self.max_tokens})", token.line
                )
            yield token
            if token.type == TokenType.EOF:
                return

    def tokenize(self) -> list[Token]:
        """Tokenize the whole source."""
        return list(self.tokens())

    def next_token(self) -> Token:
        """Scan and return the next token."""
        while self._peek() in WHITESPACE:
            self.pos += 1

        char = self._peek()
        if not char:
            return Token(TokenType.EOF, "EndOfFile", self.line)

        if is_letter(char):
            start = self.pos
            while is_letter(self._peek()):
                self.pos += 1
            word = self.source[start:self.pos]
            return Token(KEYWORDS.get(word, TokenType.ILLEGAL), word, self.line)

        if char == "\n":
            self.pos += 1
            token = Token(TokenType.NEWLINE, "Newline", self.line)
            self.line += 1
            return token

        if char == '"':
            return self._read_string()

        return Token(TokenType.ILLEGAL, self._advance(), self.line)

    def _read_string(self) -> Token:
        """Read a double-quoted literal starting at the opening quote."""
        start_line = self.line
        self.pos += 1
        end = self.source.find('"', self.pos)
        if end == -1:
            raise LexerError("unclosed string literal", start_line)
        value = self.source[self.pos:end]
        # Line breaks inside the literal still count toward later tokens
        self.line += value.count("\n")
        self.pos = end + 1
        return Token(TokenType.STRING, value, start_line)


def tokenize(
    source: str,
    max_input_size: int = MAX_INPUT_SIZE,
    max_tokens: int = MAX_TOKENS,
) -> list[Token]:
    """Convenience function to tokenize source text."""
    return Lexer(source, max_input_size=max_input_size, max_tokens=max_tokens).tokenize()
