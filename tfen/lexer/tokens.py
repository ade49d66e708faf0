"""
Lexical types for TFEN documents.

Defines token kinds, source positions and the token record shared by the
lexer, the token stream and the parser.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


class TokenKind(enum.Enum):
    """Closed set of token kinds.

    COMMENT, FLOAT, BOOL, EQUAL and REGEX are part of the vocabulary but the
    lexer never produces them: digits always become NUMBER.
    """

    END_OF_INPUT = "EndOfInput"
    COMMENT = "Comment"

    # Keywords
    RESOURCE = "Resource"
    ATTRIBUTE = "Attribute"
    HAS = "Has"
    WITH = "With"
    OF = "Of"

    # Literals
    NUMBER = "Number"
    FLOAT = "Float"
    BOOL = "Bool"
    STRING = "String"

    # Punctuation
    LBRACKET = "LBracket"                    # [
    RBRACKET = "RBracket"                    # ]
    LBRACE = "LBrace"                        # {
    RBRACE = "RBrace"                        # }
    COMMA = "Comma"                          # ,
    PERIOD = "Period"                        # .
    EQUAL = "Equal"                          # =
    REGEX = "Regex"                          # ~=

    ERROR = "Error"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, order=True)
class Position:
    """
    Location of a token or node in the source text.

    Attributes:
        line: Line number (starting at 1)
        char: Character number within the line (starting at 1)
    """
    line: int = 1
    char: int = 1

    def __str__(self) -> str:
        return f"Line: {self.line}, Char: {self.char}"


START = Position(1, 1)


@dataclass(frozen=True)
class Token:
    """
    Token with positional information for error diagnostics.

    For STRING tokens ``text`` has the surrounding quotes removed; for ERROR
    tokens it holds the lexer's message.
    """
    kind: TokenKind
    position: Position
    text: str

    def __repr__(self) -> str:
        return f"Token({self.kind.value}, {self.text!r}, {self.position.line}:{self.position.char})"


__all__ = [
    "TokenKind",
    "Position",
    "START",
    "Token",
]
