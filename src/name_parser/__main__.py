"""Command line entry point for the Name Parser library."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import FrozenSet, Optional

from .parser import parse_name
from .structures import ParseOptions


def _word_set(value: str) -> FrozenSet[str]:
    return frozenset(word.strip().lower().replace(".", "") for word in value.split(",") if word.strip())


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Split personal names into prefix, first, middle, last and suffix.")
    parser.add_argument("names", nargs="+", help="Names to parse; quote names that contain spaces")
    parser.add_argument("--fix-text", action="store_true", help="Repair mojibake with ftfy before parsing")
    parser.add_argument(
        "--fold-accents",
        action="store_true",
        help="Match accented words against the word lists by their ASCII spelling",
    )
    parser.add_argument("--prefixes", type=_word_set, help="Comma-separated prefixes replacing the built-in list")
    parser.add_argument("--suffixes", type=_word_set, help="Comma-separated suffixes replacing the built-in list")
    parser.add_argument("--particles", type=_word_set, help="Comma-separated particles replacing the built-in list")
    parser.add_argument(
        "--log-level",
        default=os.getenv("NAME_PARSER_LOG_LEVEL", "WARNING"),
        help="Logging level (default: $NAME_PARSER_LOG_LEVEL or WARNING)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv if argv is not None else sys.argv[1:])
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    options = ParseOptions(
        prefixes=args.prefixes,
        suffixes=args.suffixes,
        particles=args.particles,
        fix_text=args.fix_text,
        fold_accents=args.fold_accents,
    )

    for name in args.names:
        print(json.dumps(parse_name(name, options).as_dict(), ensure_ascii=False))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
