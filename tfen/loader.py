"""
Reading TFEN documents from disk or stdin.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Dict, Iterable, Union

from .errors import SourceNotFoundError
from .parser.nodes import Program
from .parser.parser import parse

logger = logging.getLogger(__name__)

TFEN_SUFFIX = ".tfen"
STDIN_MARKER = "-"

PathLike = Union[str, Path]


def read_source(path: PathLike) -> str:
    """
    Reads document text.

    Args:
        path: File path, or "-" to read from stdin

    Returns:
        Document text (UTF-8)

    Raises:
        SourceNotFoundError: If the file does not exist
    """
    if str(path) == STDIN_MARKER:
        logger.debug("Reading TFEN document from stdin")
        return sys.stdin.read()

    file_path = Path(path)
    if not file_path.is_file():
        raise SourceNotFoundError(f"TFEN document not found: {file_path}")
    if file_path.suffix != TFEN_SUFFIX:
        logger.warning(f"File {file_path} does not have the {TFEN_SUFFIX} extension")

    logger.debug(f"Reading TFEN document from {file_path}")
    return file_path.read_text(encoding="utf-8")


def parse_file(path: PathLike) -> Program:
    """
    Reads and parses one document.

    Raises:
        SourceNotFoundError: If the file does not exist
        LexError, TfenSyntaxError: If the document is malformed
    """
    program = parse(read_source(path))
    names = ", ".join(str(r.id) for r in program.resources)
    logger.debug(f"Parsed {path}: {len(program.resources)} resource(s) [{names}]")
    return program


def parse_files(paths: Iterable[PathLike]) -> Dict[str, Program]:
    """
    Parses several documents independently, in the given order.

    Stops at the first failing document.
    """
    return {str(p): parse_file(p) for p in paths}


__all__ = ["TFEN_SUFFIX", "read_source", "parse_file", "parse_files"]
