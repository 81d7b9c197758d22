"""
varlang-lex - print the token stream of a varlang source.

    varlang-lex program.vl
    varlang-lex -e 'my_var : int = 10'
    echo -n 'a != b' | varlang-lex --consume-double-operators

Exit status is 1 when scanning aborts (integer overflow) or when --strict
is given and an ILLEGAL token was produced.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import LexerConfig
from .lexer import Lexer, LexerError, TokenType
from .lexer.errors import create_invalid_character_error


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="varlang-lex", description="Dump varlang tokens")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("input", nargs="?", type=Path, help="Source file (reads stdin when omitted)")
    source.add_argument("-e", "--expression", help="Scan this text instead of a file")
    parser.add_argument("--consume-double-operators", action="store_true",
                        help="Consume both characters of == and !=")
    parser.add_argument("--show-locations", action="store_true",
                        help="Prefix each token with file:line:column")
    parser.add_argument("--strict", action="store_true",
                        help="Report ILLEGAL tokens as errors")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.expression is not None:
        source, filename = args.expression, "<expr>"
    elif args.input is not None:
        try:
            source = args.input.read_text(encoding="utf-8")
        except OSError as e:
            parser.error(f"cannot read {args.input}: {e.strerror}")
        filename = str(args.input)
    else:
        source, filename = sys.stdin.read(), "<stdin>"

    config = LexerConfig(consume_double_operators=args.consume_double_operators)
    try:
        tokens = Lexer(source, filename, config).tokenize()
    except LexerError as e:
        print(e, file=sys.stderr, end="")
        return 1

    for token in tokens:
        if args.show_locations:
            print(f"{token.location}\t{token}")
        else:
            print(token)

    if args.strict:
        illegal = [t for t in tokens if t.type == TokenType.ILLEGAL]
        for token in illegal:
            print(create_invalid_character_error(token.value, token.location), file=sys.stderr, end="")
        if illegal:
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
