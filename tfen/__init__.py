"""
Front end for the TFEN policy language.

Tokenizes and parses ``.tfen`` documents into an immutable AST of resource
blocks and their attributes. Evaluating policies is left to downstream tools.
"""

from .errors import LexError, SourceNotFoundError, StreamStateError, TfenError, TfenSyntaxError
from .lexer import Position, Token, TokenKind, lex, tokenize
from .parser import (
    Attribute,
    Condition,
    Identifier,
    Program,
    ParseResult,
    Resource,
    Value,
    parse,
    try_parse,
)

__all__ = [
    # Entry points
    "lex",
    "tokenize",
    "parse",
    "try_parse",
    "ParseResult",

    # Tokens
    "Position",
    "Token",
    "TokenKind",

    # AST
    "Program",
    "Resource",
    "Attribute",
    "Identifier",
    "Condition",
    "Value",

    # Errors
    "TfenError",
    "LexError",
    "TfenSyntaxError",
    "SourceNotFoundError",
    "StreamStateError",
]
