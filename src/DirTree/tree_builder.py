"""Streaming directory tree builder.

Example output (``include_files=True``):
    ├───README.md (42b)
    ├───docs
    │	└───index.md (120b)
    └───src
    	└───main.py (empty)
"""

from __future__ import annotations

import logging
import os
from typing import TextIO

from DirTree.models import DirectoryEntry

logger = logging.getLogger(__name__)

ELEMENT_PREFIX = "├───"
LAST_ELEMENT_PREFIX = "└───"
VERTICAL_PREFIX = "│"
TAB = "\t"
LINE_BREAK = "\n"


class OutputError(OSError):
    """Raised when a tree line cannot be written to the output sink."""


def list_entries(path: str | os.PathLike[str]) -> list[DirectoryEntry]:
    """Read the immediate children of *path*, sorted by name.

    Symlinks are reported as they are, never followed: a link to a
    directory is listed as a plain entry with the link's own size.

    Raises:
        OSError: if *path* is missing, unreadable or not a directory.
    """
    logger.debug("Listing %s", path)
    entries: list[DirectoryEntry] = []
    with os.scandir(path) as it:
        for child in it:
            is_dir = child.is_dir(follow_symlinks=False)
            size = 0 if is_dir else child.stat(follow_symlinks=False).st_size
            entries.append(DirectoryEntry(name=child.name, is_dir=is_dir, size=size))

    # Byte order of the filesystem encoding, so undecodable names sort as raw bytes
    entries.sort(key=lambda entry: os.fsencode(entry.name))
    logger.debug("Found %d entries in %s", len(entries), path)
    return entries


def last_visible_index(entries: list[DirectoryEntry], include_files: bool) -> int:
    """Return the index of the entry that gets the terminal connector.

    With *include_files* this is simply the last entry (``-1`` when there
    are none). Otherwise it is the last directory, defaulting to ``0`` when
    there is no directory; in that case nothing is visible and the default
    never marks an emitted line.
    """
    if include_files:
        return len(entries) - 1
    for index in range(len(entries) - 1, -1, -1):
        if entries[index].is_dir:
            return index
    return 0


def format_line(entry: DirectoryEntry, is_last: bool, prefix: str) -> str:
    """Render one tree line, terminator included."""
    line = prefix + (LAST_ELEMENT_PREFIX if is_last else ELEMENT_PREFIX)
    if entry.is_dir:
        return line + entry.name + LINE_BREAK
    if entry.size == 0:
        return line + entry.name + " (empty)" + LINE_BREAK
    return line + f"{entry.name} ({entry.size}b)" + LINE_BREAK


def _write(output: TextIO, line: str) -> None:
    try:
        output.write(line)
    except (OSError, UnicodeEncodeError) as exc:
        raise OutputError(f"Failed to write tree output: {exc}") from exc


def build_tree(
    output: TextIO,
    path: str | os.PathLike[str],
    include_files: bool,
    prefix: str,
) -> None:
    """Write the tree below *path* to *output*, one line per visible entry.

    Lines are written as they are produced. The first error at any depth
    aborts the traversal; lines already written stay written.
    """
    entries = list_entries(path)
    last_index = last_visible_index(entries, include_files)

    for index, entry in enumerate(entries):
        if not entry.is_dir and not include_files:
            continue
        is_last = index == last_index
        _write(output, format_line(entry, is_last, prefix))
        if entry.is_dir:
            child_prefix = prefix + TAB if is_last else prefix + VERTICAL_PREFIX + TAB
            build_tree(output, os.path.join(path, entry.name), include_files, child_prefix)


def dir_tree(output: TextIO, path: str | os.PathLike[str], include_files: bool) -> None:
    """Write the tree for *path* starting at the top level."""
    build_tree(output, path, include_files, "")
