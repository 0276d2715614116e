"""Parser module for stackscript."""

from .lexer import (
    Lexer,
    Token,
    TokenType,
    tokenize,
    KEYWORDS,
    MAX_INPUT_SIZE,
    MAX_TOKENS,
)
from .resolver import (
    Resolver,
    resolve,
)

__all__ = [
    # Lexer
    "Lexer",
    "Token",
    "TokenType",
    "tokenize",
    "KEYWORDS",
    "MAX_INPUT_SIZE",
    "MAX_TOKENS",
    # Resolver
    "Resolver",
    "resolve",
]
