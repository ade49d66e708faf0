"""
Lexer for TFEN documents.

A small state machine driven by a generator: every pull computes exactly one
token, so a consumer never waits for the whole document to be tokenized.

States:
- start: skips whitespace and dispatches on the next character
- word: letters, digits, '_', '"' and '.' (keywords or strings)
- number: decimal digits

An unrecognized character produces a single ERROR token, which is always the
last item of the sequence.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterator, List, Mapping, Optional

from .tokens import Position, Token, TokenKind


KEYWORDS: Mapping[str, TokenKind] = MappingProxyType({
    "with": TokenKind.WITH,
    "has": TokenKind.HAS,
    "attribute": TokenKind.ATTRIBUTE,
    "resource": TokenKind.RESOURCE,
    "of": TokenKind.OF,
})

PUNCTUATION: Mapping[str, TokenKind] = MappingProxyType({
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    "[": TokenKind.LBRACKET,
    "]": TokenKind.RBRACKET,
    ".": TokenKind.PERIOD,
    ",": TokenKind.COMMA,
})

QUOTE = '"'
_WORD_EXTRA = frozenset('_".')


def _is_word_char(ch: str) -> bool:
    return ch.isalpha() or ch.isdecimal() or ch in _WORD_EXTRA


class Lexer:
    """
    Tokenizer for a single TFEN document.

    Iterating a Lexer runs the state machine lazily; ``tokenize`` collects the
    full sequence. A Lexer instance holds the state of one pass over one
    source, so independent documents need independent instances.
    """

    def __init__(self, source: str):
        self.source = source
        self.length = len(source)

        # Pending span is source[start:pos]
        self.start = 0
        self.pos = 0

        # Position of source[start]
        self.line = 1
        self.char = 1

    def __iter__(self) -> Iterator[Token]:
        return self._run()

    def tokenize(self) -> List[Token]:
        """
        Tokenizes the whole source.

        Returns:
            List of tokens ending with END_OF_INPUT, or with ERROR if an
            unrecognized character was found
        """
        return list(self)

    # ---- states ----

    def _run(self) -> Iterator[Token]:
        while True:
            self._skip_whitespace()

            ch = self._current()
            if ch is None:
                yield self._emit(TokenKind.END_OF_INPUT)
                return

            if ch.isalpha() or ch == QUOTE:
                yield self._lex_word()
            elif ch.isdecimal():
                yield self._lex_number()
            elif ch in PUNCTUATION:
                self.pos += 1
                yield self._emit(PUNCTUATION[ch])
            else:
                yield self._error(f"unexpected token {ch!r}")
                return

    def _lex_word(self) -> Token:
        while True:
            ch = self._current()
            if ch is None or not _is_word_char(ch):
                break
            self.pos += 1

        raw = self.source[self.start:self.pos]
        keyword = KEYWORDS.get(raw)
        if keyword is not None:
            return self._emit(keyword)
        return self._emit(TokenKind.STRING, raw.strip(QUOTE))

    def _lex_number(self) -> Token:
        while True:
            ch = self._current()
            if ch is None or not ch.isdecimal():
                break
            self.pos += 1
        return self._emit(TokenKind.NUMBER)

    # ---- span bookkeeping ----

    def _current(self) -> Optional[str]:
        if self.pos >= self.length:
            return None
        return self.source[self.pos]

    def _skip_whitespace(self) -> None:
        while True:
            ch = self._current()
            if ch is None or not ch.isspace():
                break
            self.pos += 1
        self._advance_span()

    def _emit(self, kind: TokenKind, text: Optional[str] = None) -> Token:
        if text is None:
            text = self.source[self.start:self.pos]
        token = Token(kind=kind, position=Position(self.line, self.char), text=text)
        self._advance_span()
        return token

    def _error(self, message: str) -> Token:
        return Token(kind=TokenKind.ERROR, position=Position(self.line, self.char), text=message)

    def _advance_span(self) -> None:
        """Moves line/char past the pending span and starts a new one."""
        span = self.source[self.start:self.pos]
        newlines = span.count("\n")
        if newlines:
            self.line += newlines
            self.char = len(span) - span.rfind("\n")
        else:
            self.char += len(span)
        self.start = self.pos


def lex(source: str) -> Iterator[Token]:
    """
    Lazily tokenizes a TFEN document.

    Args:
        source: Document text

    Yields:
        Token: Next token; the last one is END_OF_INPUT or ERROR
    """
    return iter(Lexer(source))


def tokenize(source: str) -> List[Token]:
    """Tokenizes a TFEN document into a list."""
    return Lexer(source).tokenize()


__all__ = ["Lexer", "KEYWORDS", "PUNCTUATION", "lex", "tokenize"]
