"""Tree row formatting and depth-first traversal.

Rows are built from an ancestry tuple: one flag per ancestor level recording
whether that ancestor was the last directory among its siblings. Each
recursive call extends its own copy, so sibling branches never share state.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from ..file_tree_model import list_directory_entries, partition_entries
from ..sink import TextSink

VERTICAL_CONTINUATION = "│  "
BLANK_CONTINUATION = "    "
FILE_INDENT_NO_DIRECTORIES = "  "
BRANCH_CONNECTOR = "├─"
LAST_BRANCH_CONNECTOR = "└─"
ACCESS_ERROR_DETAIL_INDENT = " " * 8


def build_prefix(ancestry: tuple[bool, ...]) -> str:
    """Return the shared indentation for rows at depth ``len(ancestry)``."""
    return "".join(BLANK_CONTINUATION if is_last else VERTICAL_CONTINUATION for is_last in ancestry)


def file_connector(has_directories: bool) -> str:
    # Files sit above the directory block; keep the bar running down to it.
    return VERTICAL_CONTINUATION if has_directories else FILE_INDENT_NO_DIRECTORIES


def directory_connector(is_last: bool) -> str:
    return LAST_BRANCH_CONNECTOR if is_last else BRANCH_CONNECTOR


def format_access_error(directory: Path, error: OSError) -> list[str]:
    """Return the annotation rows for a directory that could not be listed."""
    return [
        f"{LAST_BRANCH_CONNECTOR}[Access error : {directory.name}]",
        f"{ACCESS_ERROR_DETAIL_INDENT}{error}",
    ]


def iter_tree_lines(directory: Path, ancestry: tuple[bool, ...] = ()) -> Iterator[str]:
    """Yield every row below ``directory`` in depth-first order.

    Files come first, then each directory followed by its own subtree. A
    directory that cannot be listed yields an access-error annotation instead
    of raising, so its siblings still render.
    """
    entries, scan_error = list_directory_entries(directory)
    if scan_error is not None:
        yield from format_access_error(directory, scan_error)
        return

    files, directories = partition_entries(entries)
    prefix = build_prefix(ancestry)

    file_prefix = prefix + file_connector(bool(directories))
    for entry in files:
        yield file_prefix + entry.name

    last_index = len(directories) - 1
    for index, entry in enumerate(directories):
        is_last = index == last_index
        yield prefix + directory_connector(is_last) + entry.name
        yield from iter_tree_lines(entry.path, ancestry + (is_last,))


def render_directory_tree(sink: TextSink, directory: Path, ancestry: tuple[bool, ...] = ()) -> None:
    """Write the full subtree of ``directory`` to ``sink``."""
    for line in iter_tree_lines(directory, ancestry):
        sink.write_line(line)


def render_tree(sink: TextSink, root: Path, header: str | None = None) -> None:
    """Write the header row followed by the tree below ``root``.

    ``header`` defaults to ``str(root)``; the CLI passes the argument as typed.
    """
    sink.write_line(str(root) if header is None else header)
    render_directory_tree(sink, root)


__all__ = [
    "VERTICAL_CONTINUATION",
    "BLANK_CONTINUATION",
    "BRANCH_CONNECTOR",
    "LAST_BRANCH_CONNECTOR",
    "build_prefix",
    "file_connector",
    "directory_connector",
    "format_access_error",
    "iter_tree_lines",
    "render_directory_tree",
    "render_tree",
]
