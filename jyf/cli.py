"""Command line entry point: run a jyf source file.

Structured diagnostics are printed to stderr with the call stack, outermost
call first, and the process exits with status 1. Any other exception is a
bug in the interpreter or the library and is left to propagate.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from termcolor import colored

from jyf.config import get_log_level, use_color
from jyf.errors import JyfError
from jyf.interpreter import Interpreter

logger = logging.getLogger(__name__)


def format_error(error: JyfError, color: bool = False) -> str:
    """Render a diagnostic and its call stack for the terminal."""
    header = str(error)
    if error.coords is not None:
        header += f", at {error.coords.describe()}"
    if color:
        header = colored(header, "red", attrs=["bold"], force_color=True)

    lines = [header]
    # Captured innermost first; report outermost first
    for frame in reversed(error.callstack or ()):
        lines.append(f"  {frame.describe()}")
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="jyf", description="Run a jyf program.")
    parser.add_argument("file", help="source file to run")
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug output")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else get_log_level())

    path = Path(args.file)
    try:
        source = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        reason = getattr(exc, 'strerror', None) or exc
        print(f"jyf: cannot read {args.file}: {reason}", file=sys.stderr)
        return 1

    try:
        Interpreter().eval(source, args.file)
    except JyfError as error:
        logger.debug("program failed", exc_info=True)
        print(format_error(error, use_color(sys.stderr)), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
