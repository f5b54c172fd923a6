"""Bible reference extraction entry point.

Dependencies:
- pip install regex

Parse citations given on the command line:
    python main.py "Gen 1:1-3, Act 9"

Parse a file and print one citation per line:
    python main.py --file sermon.txt --format text
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from bible_reference.formatter import format_reference
from bible_reference.grammar import GrammarError, default_grammar, load_grammar
from bible_reference.models import BibleReference
from bible_reference.parser import ReferenceParser


def _read_text(args: argparse.Namespace) -> str:
    if args.text:
        return " ".join(args.text)
    if args.file:
        return Path(args.file).read_text(encoding="utf-8")
    return sys.stdin.read()


def _render(references: list[BibleReference], output_format: str) -> str:
    if output_format == "text":
        return "\n".join(format_reference(reference) for reference in references)
    return json.dumps(
        [reference.to_dict() for reference in references],
        indent=2,
        ensure_ascii=False,
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Extract Bible references from text")
    parser.add_argument("text", nargs="*", help="Text to scan; read from stdin when omitted")
    parser.add_argument("--file", help="Read the text from this file")
    parser.add_argument(
        "--format",
        choices=("json", "text"),
        default="json",
        help="Output format",
    )
    parser.add_argument("--grammar", help="JSON file with custom grammar patterns")
    parser.add_argument("--verbose", action="store_true", help="Log skipped matches")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if args.grammar and not Path(args.grammar).exists():
        print(f"error: grammar file {args.grammar} does not exist", file=sys.stderr)
        return 2

    try:
        grammar = load_grammar(Path(args.grammar)) if args.grammar else default_grammar()
        text = _read_text(args)
    except (GrammarError, OSError, UnicodeDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    references = ReferenceParser(grammar).parse(text)
    print(_render(references, args.format))
    return 0 if references else 1


if __name__ == "__main__":
    sys.exit(main())
