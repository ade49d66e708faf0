"""
Exceptions raised while reading TFEN documents.

All expected errors that describe a problem in the document (or in how it
was supplied) inherit from TfenError and can be shown to the user as clean
messages without stack traces.

Programming errors and bugs should NOT inherit from TfenError:
they will propagate with full tracebacks.
"""

from __future__ import annotations

from typing import Optional, Tuple

from .lexer.tokens import Position, Token, TokenKind


class TfenError(Exception):
    """
    Base class for all user-facing errors of the TFEN front end.

    Attributes:
        message: Human-readable description
        position: Where in the source the problem was found (if known)
    """

    def __init__(self, message: str, position: Optional[Position] = None):
        super().__init__(message)
        self.message = message
        self.position = position


class LexError(TfenError):
    """An unrecognized character stopped tokenization."""

    def __init__(self, message: str, position: Position):
        super().__init__(f"lexer: {message} at line {position.line} char {position.char}", position)
        self.reason = message


class TfenSyntaxError(TfenError):
    """The parser found a token that the grammar does not allow at this point."""

    def __init__(self, token: Token, expected: Tuple[TokenKind, ...]):
        expected_str = ", ".join(kind.value for kind in expected)
        super().__init__(
            f"parser: unexpected token {token.kind.value} with value {token.text!r} "
            f"at line {token.position.line} char {token.position.char}, expected: {expected_str}",
            token.position,
        )
        self.token = token
        self.expected = expected


class SourceNotFoundError(TfenError):
    """A document path given to the loader does not exist."""
    pass


class StreamStateError(RuntimeError):
    """
    The token stream was driven in a way its one-token lookahead cannot support.

    This is a bug in the caller, not a problem with the document.
    """
    pass


__all__ = [
    "TfenError",
    "LexError",
    "TfenSyntaxError",
    "SourceNotFoundError",
    "StreamStateError",
]
