"""Command line driver: lex a PLC source file and print its tokens."""

import sys
import logging
import argparse

from .lexer import LexerConfig, LexicalError, tokenize_file, tokenize_string


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="plc-lex", description="Lex a PLC source file")
    parser.add_argument("path", nargs="?", default="-",
                        help="Path to PLC source, or - for stdin (default)")
    parser.add_argument("--no-identifier-hyphens", action="store_true",
                        help="Do not allow '-' inside identifiers")
    parser.add_argument("--reject-leading-zeros", action="store_true",
                        help="Treat numbers such as 007 as errors")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s:%(name)s:%(message)s",
    )

    config = LexerConfig(
        identifier_hyphens=not args.no_identifier_hyphens,
        reject_leading_zeros=args.reject_leading_zeros,
    )

    try:
        if args.path == "-":
            tokens = tokenize_string(sys.stdin.read(), "<stdin>", config)
        else:
            tokens = tokenize_file(args.path, config)
    except FileNotFoundError:
        print(f"error: file not found: {args.path}", file=sys.stderr)
        return 2
    except LexicalError as e:
        print(e, file=sys.stderr, end="")
        return 1

    for token in tokens:
        print(f"{token.kind.name}\t{token.offset}\t{token.lexeme!r}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
