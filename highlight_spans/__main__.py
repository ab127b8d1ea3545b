"""Inspect a highlight string from the command line.

Usage:
    python -m highlight_spans "<highlight>" [--convention caret|marker] [--source TEXT]

Examples:
    python -m highlight_spans "^--^ |"
    python -m highlight_spans "      ^---^" --source "struct field"
"""

from __future__ import annotations

import argparse
import logging
import sys

from highlight_spans.errors import HighlightSyntaxError
from highlight_spans.models import DEFAULT_CONVENTION
from highlight_spans.render import extract_spans
from highlight_spans.scanner import CONVENTIONS, scan_spans

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="highlight_spans",
        description="Print the spans marked by a highlight string",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s "^--^ |"
  %(prog)s "II^^^^"
  %(prog)s "^-^ ^^^" --convention caret
  %(prog)s "      ^---^" --source "struct field"
        """,
    )
    parser.add_argument(
        "highlight",
        help="Highlight string to scan",
    )
    parser.add_argument(
        "-c", "--convention",
        choices=CONVENTIONS,
        default=DEFAULT_CONVENTION,
        help=f"Marker convention (default: {DEFAULT_CONVENTION})",
    )
    parser.add_argument(
        "-s", "--source",
        default=None,
        help="Annotated source line; prints the text under each span",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        spans = scan_spans(args.highlight, convention=args.convention)
    except HighlightSyntaxError as e:
        sys.stderr.write(f"Error: {e}\n")
        return 1

    logger.debug("Scanned %d spans with the %s convention", len(spans), args.convention)

    texts = extract_spans(args.source, spans) if args.source is not None else None
    for i, span in enumerate(spans):
        line = f"{span.start} {span.end}"
        if texts is not None:
            line += f" {texts[i]!r}"
        sys.stdout.write(line + "\n")

    return 0


if __name__ == "__main__":
    sys.exit(main())
