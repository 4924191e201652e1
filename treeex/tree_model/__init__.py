"""Tree rendering: prefix/connector formatting and depth-first traversal."""

from __future__ import annotations

from .rendering import (
    build_prefix,
    directory_connector,
    file_connector,
    format_access_error,
    iter_tree_lines,
    render_directory_tree,
    render_tree,
)

__all__ = [
    "build_prefix",
    "directory_connector",
    "file_connector",
    "format_access_error",
    "iter_tree_lines",
    "render_directory_tree",
    "render_tree",
]
