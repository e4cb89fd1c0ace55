"""pathstamp CLI entry point: argument parsing and the annotation loop.

Expands every glob pattern in the order given, annotates each match, and
prints the paths it rewrote.  All configurable strings (program name,
description, messages, exit codes) come from the central config module.

Usage::

    pathstamp 'src/**/*.rs' '*.py'
    PATHSTAMP_LOG=debug pathstamp 'scripts/*.sh'

Error policy:
    A pattern that fails to expand is logged and skipped.  A file that
    cannot be read or written stops the run with a non-zero exit code;
    files rewritten before it stay rewritten.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from pathstamp import __version__
from pathstamp.annotator import annotate, relative_display
from pathstamp.exceptions import (
    AnnotationIOError,
    GlobPatternError,
    InvalidInvocationError,
)
from pathstamp.lib import config
from pathstamp.lib.expand import expand_pattern
from pathstamp.lib.logger import get_logger, setup_logging
from pathstamp.lib.theme import colorize


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the ``pathstamp`` command."""
    prog = config.get_str("cli.prog_name")
    parser = argparse.ArgumentParser(
        prog=prog, description=config.get_str("cli.description")
    )
    parser.add_argument(
        "--version", action="version", version=f"{prog} {__version__}"
    )
    parser.add_argument(
        "patterns", nargs="*", metavar="pattern",
        help=config.get_str("cli.patterns_help"),
    )
    return parser


def run(patterns: Sequence[str], root_dir: Path) -> list[Path]:
    """Annotate every file matched by ``patterns`` and return those rewritten.

    Args:
        patterns: Glob patterns, processed in order.
        root_dir: Directory the comment paths are relative to.

    Returns:
        Paths of the files that were modified, in processing order.

    Raises:
        InvalidInvocationError: If ``patterns`` is empty.
        AnnotationIOError: On the first file that cannot be processed.
    """
    if not patterns:
        raise InvalidInvocationError()

    logger = get_logger()
    updated: list[Path] = []
    for pattern in patterns:
        try:
            matches = expand_pattern(pattern)
        except GlobPatternError as exc:
            logger.error(str(exc))
            continue
        logger.debug("%s: %d match(es)", pattern, len(matches))
        for path in matches:
            if annotate(root_dir, path):
                updated.append(path)
            else:
                logger.debug("unchanged: %s", path)
    return updated


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Parse arguments, run the annotation loop, and exit.

    Print the updated paths to stdout, one per line (coloured only on a
    TTY), after an informational log line on stderr.  Exit with
    ``exit_codes.invalid_invocation`` when no pattern is given and
    ``exit_codes.io_error`` when a file fails.
    """
    args = build_parser().parse_args(argv)
    logger = setup_logging()
    root_dir = Path.cwd()

    try:
        updated = run(args.patterns, root_dir)
    except InvalidInvocationError as exc:
        logger.error(str(exc))
        sys.exit(config.get_int("exit_codes.invalid_invocation"))
    except AnnotationIOError as exc:
        logger.error(str(exc))
        sys.exit(config.get_int("exit_codes.io_error"))

    if updated:
        logger.info(config.get_str("messages.updated_header"))
        for path in updated:
            display = relative_display(root_dir, path)
            sys.stdout.write(colorize(display, "path", stream=sys.stdout) + "\n")
    sys.exit(config.get_int("exit_codes.ok"))


if __name__ == "__main__":
    main()
