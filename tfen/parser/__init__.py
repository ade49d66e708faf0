"""
Syntax analysis of TFEN documents: token stream, AST nodes and parser.
"""

from .nodes import Attribute, Condition, Identifier, Node, Program, Resource, Value
from .parser import Parser, ParseResult, parse, try_parse
from .stream import TokenStream

__all__ = [
    "Node",
    "Identifier",
    "Condition",
    "Value",
    "Attribute",
    "Resource",
    "Program",
    "Parser",
    "ParseResult",
    "parse",
    "try_parse",
    "TokenStream",
]
