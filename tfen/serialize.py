"""
Conversion of tokens and AST nodes to plain data, JSON and YAML.

Every node becomes a mapping with a "type" key (the node class name), a
"position" mapping and its own fields in declaration order.
"""

from __future__ import annotations

import dataclasses
import io
import json
from enum import Enum
from typing import Any

from ruamel.yaml import YAML

from .lexer.tokens import Position, Token
from .parser.nodes import Node


def to_data(obj: Any) -> Any:
    """Recursively converts tokens, positions, nodes and sequences to dicts/lists."""
    if isinstance(obj, Position):
        return {"line": obj.line, "char": obj.char}
    if isinstance(obj, Token):
        return {"kind": obj.kind.value, "position": to_data(obj.position), "text": obj.text}
    if isinstance(obj, Node):
        data = {"type": type(obj).__name__, "position": to_data(obj.position)}
        for f in dataclasses.fields(obj):
            if f.name == "position":
                continue
            data[f.name] = to_data(getattr(obj, f.name))
        return data
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, (list, tuple)):
        return [to_data(x) for x in obj]
    return obj


def dumps_json(obj: Any, indent: int | None = 2) -> str:
    return json.dumps(to_data(obj), ensure_ascii=False, indent=indent)


_YAML = YAML(typ="rt")
_YAML.default_flow_style = False
_YAML.indent(mapping=2, sequence=4, offset=2)
_YAML.width = 1000000


def dumps_yaml(obj: Any) -> str:
    buf = io.StringIO()
    _YAML.dump(to_data(obj), buf)
    return buf.getvalue()


__all__ = ["to_data", "dumps_json", "dumps_yaml"]
