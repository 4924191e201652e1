"""Domain datatype for one captured directory listing entry."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class DirectoryEntry:
    """One listed child of a directory, captured for a single traversal frame."""

    name: str
    path: Path
    is_dir: bool


__all__ = [
    "DirectoryEntry",
]
