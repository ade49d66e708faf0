"""
Lexical analysis of TFEN documents.
"""

from .lexer import Lexer, KEYWORDS, lex, tokenize
from .tokens import Position, START, Token, TokenKind

__all__ = [
    "Lexer",
    "KEYWORDS",
    "lex",
    "tokenize",
    "Position",
    "START",
    "Token",
    "TokenKind",
]
