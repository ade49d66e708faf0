from __future__ import annotations

import argparse
import logging
import sys
from typing import Any

from .errors import TfenError
from .lexer.lexer import lex
from .lexer.tokens import TokenKind
from .loader import parse_file, read_source
from .serialize import dumps_json, dumps_yaml
from .settings import OUTPUT_FORMATS, Settings, setup_logging
from .version import tool_version

logger = logging.getLogger(__name__)


def _build_parser(settings: Settings) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="tfen",
        description="TFEN policy language front end (lexer and parser)",
        add_help=True,
    )
    p.add_argument("-v", "--version", action="version", version=f"%(prog)s {tool_version()}")
    p.add_argument(
        "--log-level",
        default=settings.log_level,
        help="logging level (default from TFEN_LOG_LEVEL, otherwise WARNING)",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    def add_common(sp: argparse.ArgumentParser) -> None:
        sp.add_argument("file", help="path to a .tfen document, or - for stdin")
        sp.add_argument(
            "--format",
            choices=OUTPUT_FORMATS,
            default=settings.output_format,
            help="output format (default from TFEN_OUTPUT_FORMAT, otherwise json)",
        )

    sp_lex = sub.add_parser("lex", help="print the token sequence")
    add_common(sp_lex)

    sp_parse = sub.add_parser("parse", help="print the AST")
    add_common(sp_parse)

    return p


def _render(data: Any, fmt: str) -> str:
    if fmt == "yaml":
        return dumps_yaml(data)
    return dumps_json(data) + "\n"


def main(argv: list[str] | None = None) -> int:
    try:
        settings = Settings.from_env()
    except ValueError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2

    ns = _build_parser(settings).parse_args(argv)

    try:
        setup_logging(ns.log_level.upper())
    except ValueError as e:
        sys.stderr.write(f"Invalid log level '{ns.log_level}': {e}\n")
        return 2

    try:
        if ns.cmd == "lex":
            tokens = list(lex(read_source(ns.file)))
            sys.stdout.write(_render(tokens, ns.format))
            # The token list ends with ERROR when lexing failed
            if tokens and tokens[-1].kind is TokenKind.ERROR:
                last = tokens[-1]
                sys.stderr.write(f"lexer: {last.text} at line {last.position.line} char {last.position.char}\n")
                return 2
            return 0

        if ns.cmd == "parse":
            program = parse_file(ns.file)
            sys.stdout.write(_render(program, ns.format))
            return 0

    except TfenError as e:
        logger.debug(f"{ns.cmd} failed: {e}")
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2

    return 2


if __name__ == "__main__":
    raise SystemExit(main())
