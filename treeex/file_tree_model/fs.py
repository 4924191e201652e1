"""Filesystem listing and file/directory partitioning for tree rendering."""

from __future__ import annotations

import os
from pathlib import Path

from .natural_sort import natural_sort_key
from .types import DirectoryEntry


def list_directory_entries(directory: Path) -> tuple[list[DirectoryEntry], OSError | None]:
    """List every direct child of ``directory``, hidden entries included.

    Returns ``(entries, scan_error)``. ``scan_error`` is set when the directory
    cannot be scanned; entries are then empty. The scandir handle is closed
    before returning.
    """
    entries: list[DirectoryEntry] = []
    try:
        with os.scandir(directory) as children:
            for child in children:
                try:
                    is_dir = child.is_dir()
                except OSError:
                    is_dir = False
                entries.append(DirectoryEntry(name=child.name, path=Path(child.path), is_dir=is_dir))
    except OSError as exc:
        return [], exc
    return entries, None


def partition_entries(
    entries: list[DirectoryEntry],
) -> tuple[list[DirectoryEntry], list[DirectoryEntry]]:
    """Split ``entries`` into ``(files, directories)``, each in natural order.

    Anything that is not a directory (sockets, fifos, broken links) counts as a
    file.
    """
    files = [entry for entry in entries if not entry.is_dir]
    directories = [entry for entry in entries if entry.is_dir]
    files.sort(key=lambda entry: natural_sort_key(entry.name))
    directories.sort(key=lambda entry: natural_sort_key(entry.name))
    return files, directories


__all__ = [
    "list_directory_entries",
    "partition_entries",
]
