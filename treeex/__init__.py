"""Public package surface for treeex.

Exports ``main`` for programmatic CLI invocation.
Rendering lives in ``treeex.tree_model`` and byte output in ``treeex.sink``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
