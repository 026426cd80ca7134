"""Command-line entry point: ``dirtree <path> [-f]``."""

from __future__ import annotations

import io
import logging
import os
import sys
from typing import Sequence, TextIO

from DirTree.models import TreeArgs
from DirTree.tree_builder import dir_tree

logger = logging.getLogger(__name__)

FILES_FLAG = "-f"
USAGE = "usage: dirtree <path> [-f]"
LOG_LEVEL_ENV = "DIRTREE_LOG_LEVEL"

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


class UsageError(Exception):
    """Raised when the argument vector is malformed."""


def parse_args(argv: Sequence[str]) -> TreeArgs:
    """Parse a full argument vector (program name included).

    Any third argument other than ``-f`` leaves files excluded.
    """
    if len(argv) not in (2, 3):
        raise UsageError(USAGE)

    include_files = False
    if len(argv) == 3:
        include_files = argv[2] == FILES_FLAG
        if not include_files:
            logger.warning("Ignoring unrecognized argument %r", argv[2])

    return TreeArgs(path=argv[1], include_files=include_files)


def run(args: TreeArgs, output: TextIO) -> None:
    """Render the tree described by *args* to *output*."""
    dir_tree(output, args.path, args.include_files)


def _configure_logging() -> None:
    level_name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _reconfigure_stdout() -> None:
    # Box-drawing glyphs need UTF-8; undecodable filenames go out as their raw bytes
    if isinstance(sys.stdout, io.TextIOWrapper):
        sys.stdout.reconfigure(encoding="utf-8", errors="surrogateescape")


def main(argv: Sequence[str] | None = None) -> int:
    _configure_logging()
    if argv is None:
        argv = sys.argv

    try:
        args = parse_args(argv)
    except UsageError as exc:
        print(exc, file=sys.stderr)
        return EXIT_USAGE

    _reconfigure_stdout()
    try:
        run(args, sys.stdout)
    except OSError as exc:
        print(exc, file=sys.stderr)
        return EXIT_FAILURE
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
