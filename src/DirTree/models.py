"""Data classes for DirTree."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DirectoryEntry:
    name: str
    is_dir: bool
    size: int = 0  # bytes; meaningless for directories


@dataclass(frozen=True)
class TreeArgs:
    path: str
    include_files: bool = False
