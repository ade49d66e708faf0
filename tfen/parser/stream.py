"""
Token stream between the lexer and the parser.

Pulls tokens from the lexer one at a time and offers a single token of
lookahead. The grammar never needs more, so deeper lookahead is rejected as a
programming error.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from ..errors import LexError, StreamStateError
from ..lexer.tokens import Position, Token, TokenKind


class TokenStream:
    """
    Sequential cursor over lexer output.

    - ``next()`` consumes and returns the next token
    - ``peek()`` returns the next token without consuming it
    - ``backup()`` undoes exactly one ``next()``

    Once the underlying iterator is exhausted, the last token is returned
    again on every pull. An ERROR token from the lexer is raised as LexError
    at the moment it is pulled.
    """

    def __init__(self, tokens: Iterable[Token]):
        self._tokens: Iterator[Token] = iter(tokens)
        self._last_pulled: Optional[Token] = None

        # Token returned by the most recent next(), available for backup()
        self._consumed: Optional[Token] = None
        # Token already pulled but not yet consumed (peeked or backed up)
        self._pending: Optional[Token] = None

    def next(self) -> Token:
        if self._pending is not None:
            token = self._pending
            self._pending = None
        else:
            token = self._pull()
        self._consumed = token
        return token

    def peek(self) -> Token:
        if self._pending is None:
            self._pending = self._pull()
        return self._pending

    def backup(self) -> None:
        """
        Returns the most recently consumed token to the stream.

        Raises:
            StreamStateError: If nothing can be backed up, or a token is
                already waiting (peeked or backed up)
        """
        if self._pending is not None:
            raise StreamStateError("backup() would exceed one token of lookahead")
        if self._consumed is None:
            raise StreamStateError("backup() without a preceding next()")
        self._pending = self._consumed
        self._consumed = None

    def _pull(self) -> Token:
        token = next(self._tokens, None)
        if token is None:
            token = self._last_pulled or Token(kind=TokenKind.END_OF_INPUT, position=Position(), text="")

        self._last_pulled = token
        if token.kind is TokenKind.ERROR:
            raise LexError(token.text, token.position)
        return token


__all__ = ["TokenStream"]
