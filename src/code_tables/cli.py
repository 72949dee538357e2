"""Command-line entry point for the code-tables mdbook preprocessor.

mdbook invokes the preprocessor twice:
  code-tables supports <renderer>   -- exit 0 if the renderer is supported
  code-tables                       -- read [context, book] JSON on stdin,
                                       write the processed book to stdout

Configure it in book.toml:
  [preprocessor.code-tables]
  command = "code-tables"
"""

import argparse
import logging
import sys
from typing import IO

from code_tables.book import parse_input, write_output
from code_tables.config import LOG_FORMAT, LOG_LEVEL
from code_tables.pipeline import CodeTables

logger = logging.getLogger(__name__)


def make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="code-tables",
        description="A mdbook preprocessor that allows fenced code blocks in your markdown tables",
    )
    subparsers = parser.add_subparsers(dest="command")
    supports = subparsers.add_parser("supports", help="Check whether a renderer is supported")
    supports.add_argument("renderer", help="Renderer name, e.g. 'html'")
    return parser


def handle_processing(preprocessor: CodeTables, stdin: IO[str], stdout: IO[str]) -> None:
    """Read the book from *stdin*, run the preprocessor, and write the result to *stdout*."""
    ctx, book = parse_input(stdin)
    processed = preprocessor.run(ctx, book)
    write_output(processed, stdout)


def main(argv: list[str] | None = None, stdin: IO[str] | None = None, stdout: IO[str] | None = None) -> int:
    """Run the preprocessor and return the process exit code."""
    args = make_parser().parse_args(argv)
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
    preprocessor = CodeTables()

    if args.command == "supports":
        supported = preprocessor.supports_renderer(args.renderer)
        logger.debug("Renderer %r supported: %s", args.renderer, supported)
        return 0 if supported else 1

    try:
        handle_processing(preprocessor, stdin or sys.stdin, stdout or sys.stdout)
    except ValueError as exc:
        logger.error("Could not process book: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
