"""
Recursive-descent parser for TFEN documents.

Builds the AST from the token stream produced by the lexer.

Grammar:
program       → resource* EndOfInput
resource      → "resource" STRING "has" "{" resource_body* "}"
resource_body → attribute | "," | STRING
attribute     → "attribute" STRING "with" STRING "of" "[" value* "]"
value         → STRING | "," | "[" | "]"

A bare STRING inside a resource body replaces the resource identifier.
Empty STRING values are dropped from the value list.

The first unexpected token aborts the whole parse with TfenSyntaxError; no
partial tree is ever returned.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, NoReturn, Optional, Tuple

from ..errors import TfenError, TfenSyntaxError
from ..lexer.lexer import lex
from ..lexer.tokens import Token, TokenKind
from .nodes import Attribute, Condition, Identifier, Program, Resource, Value
from .stream import TokenStream


class Parser:
    """
    Recursive-descent parser over a single token stream.

    Each production looks at no more than the next token.
    """

    def __init__(self, tokens: Iterable[Token]):
        self._stream = TokenStream(tokens)

    def parse(self) -> Program:
        """
        Parses the whole document.

        Returns:
            Root Program node

        Raises:
            TfenSyntaxError: On the first token the grammar does not allow
            LexError: If the lexer hit an unrecognized character
        """
        return self._parse_program()

    def _parse_program(self) -> Program:
        resources: List[Resource] = []
        while True:
            kind = self._stream.peek().kind
            if kind is TokenKind.END_OF_INPUT:
                return Program(resources=tuple(resources))
            if kind is TokenKind.RESOURCE:
                resources.append(self._parse_resource())
            else:
                self._unexpected(self._stream.next(), TokenKind.END_OF_INPUT, TokenKind.RESOURCE)

    def _parse_resource(self) -> Resource:
        keyword = self._expect(TokenKind.RESOURCE)
        identifier = self._parse_identifier()
        self._expect(TokenKind.HAS)
        self._expect(TokenKind.LBRACE)

        attributes: List[Attribute] = []
        while True:
            token = self._stream.next()
            if token.kind is TokenKind.ATTRIBUTE:
                self._stream.backup()
                attributes.append(self._parse_attribute())
            elif token.kind is TokenKind.STRING:
                # A bare string re-declares the resource identifier
                self._stream.backup()
                identifier = self._parse_identifier()
            elif token.kind is TokenKind.COMMA:
                continue
            elif token.kind is TokenKind.RBRACE:
                return Resource(position=keyword.position, id=identifier, attributes=tuple(attributes))
            else:
                self._unexpected(
                    token, TokenKind.ATTRIBUTE, TokenKind.STRING, TokenKind.COMMA, TokenKind.RBRACE
                )

    def _parse_attribute(self) -> Attribute:
        keyword = self._expect(TokenKind.ATTRIBUTE)
        identifier = self._parse_identifier()
        self._expect(TokenKind.WITH)
        condition_token = self._expect(TokenKind.STRING)
        self._expect(TokenKind.OF)
        self._expect(TokenKind.LBRACKET)

        return Attribute(
            position=keyword.position,
            id=identifier,
            condition=Condition(position=condition_token.position, text=condition_token.text),
            values=self._parse_values(),
        )

    def _parse_values(self) -> Tuple[Value, ...]:
        values: List[Value] = []
        while True:
            kind = self._stream.peek().kind
            if kind in (TokenKind.LBRACKET, TokenKind.COMMA):
                self._stream.next()
            elif kind is TokenKind.RBRACKET:
                self._stream.next()
                return tuple(values)
            elif kind is TokenKind.STRING:
                token = self._stream.next()
                if token.text != "":
                    values.append(Value(position=token.position, text=token.text))
            else:
                self._unexpected(
                    self._stream.next(),
                    TokenKind.LBRACKET, TokenKind.STRING, TokenKind.COMMA, TokenKind.RBRACKET,
                )

    def _parse_identifier(self) -> Identifier:
        token = self._expect(TokenKind.STRING)
        return Identifier(position=token.position, name=token.text)

    # Token helpers

    def _expect(self, expected: TokenKind) -> Token:
        """Consumes the next token, which must be of the expected kind."""
        token = self._stream.next()
        if token.kind is not expected:
            self._unexpected(token, expected)
        return token

    def _unexpected(self, token: Token, *expected: TokenKind) -> NoReturn:
        raise TfenSyntaxError(token, tuple(expected))


@dataclass(frozen=True)
class ParseResult:
    """Outcome of ``try_parse``: exactly one of program/error is set."""
    program: Optional[Program] = None
    error: Optional[TfenError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse(source: str) -> Program:
    """
    Lexes and parses a TFEN document.

    Args:
        source: Document text

    Returns:
        Root Program node

    Raises:
        LexError: On an unrecognized character
        TfenSyntaxError: On a grammar violation
    """
    return Parser(lex(source)).parse()


def try_parse(source: str) -> ParseResult:
    """
    Like ``parse``, but returns document errors instead of raising them.

    Only TfenError is folded into the result; internal faults still raise.
    """
    try:
        return ParseResult(program=parse(source))
    except TfenError as e:
        return ParseResult(error=e)


__all__ = ["Parser", "ParseResult", "parse", "try_parse"]
