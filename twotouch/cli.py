"""
Command-line front end for two-touch conversion.

    twotouch encode ごくろうさん
    twotouch decode 25042395133103
"""

from __future__ import annotations

import argparse
import logging
import sys

from twotouch.converter import TwoTouchConverter
from twotouch.types import ParseError, TwoTouchConfig


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="twotouch", description="Convert text to and from pager two-touch input.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    encode_parser = subparsers.add_parser("encode", help="Encode text into two-touch codes.")
    encode_parser.add_argument("texts", nargs="+", help="Text to encode.")
    encode_parser.add_argument(
        "--no-shortcuts",
        action="store_true",
        help="Only print the literal encoding, without phrase shortcuts.",
    )

    decode_parser = subparsers.add_parser("decode", help="Decode two-touch codes into text.")
    decode_parser.add_argument("codes", nargs="+", help="Digit strings to decode.")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    config = TwoTouchConfig.create_default()
    if args.command == "encode" and args.no_shortcuts:
        config = config.with_phrase_shortcuts(False)
    converter = TwoTouchConverter(config)

    inputs = args.texts if args.command == "encode" else args.codes
    exit_code = 0
    for value in inputs:
        prefix = f"{value}: " if len(inputs) > 1 else ""
        try:
            if args.command == "encode":
                for code in converter.encode(value):
                    print(f"{prefix}{code}")
            else:
                print(f"{prefix}{converter.decode(value)}")
        except ParseError as e:
            print(f"error: {e}", file=sys.stderr)
            exit_code = 1
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
