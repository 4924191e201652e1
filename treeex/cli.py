"""Command-line front door for treeex.

Parses CLI options, validates the root directory, and picks the destination.
Then renders the tree through a UTF-8 sink.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .sink import console_sink, open_file_sink
from .tree_model import render_tree

DEFAULT_ROOT = "."
OUTPUT_SWITCHES = frozenset({"-o", "-O", "/o", "/O"})


def _normalize_output_switches(argv: list[str]) -> tuple[list[str], str | None]:
    """Bind each output switch to the token after it as ``-o=<file>``.

    Switches consume the next token left to right, whatever it looks like, so
    ``/o /O`` names a file called ``/O``. Only exact switch tokens are
    matched, so absolute POSIX paths such as ``/tmp`` stay positional. A final
    switch with no token after it is returned separately as the root path.
    """
    normalized: list[str] = []
    dangling_switch = None
    index = 0
    while index < len(argv):
        arg = argv[index]
        if arg in OUTPUT_SWITCHES:
            if index + 1 == len(argv):
                dangling_switch = arg
                break
            normalized.append(f"-o={argv[index + 1]}")
            index += 2
        else:
            normalized.append(arg)
            index += 1
    return normalized, dangling_switch


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="treeex",
        description="Print a directory tree, hidden entries included, as UTF-8 text.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=DEFAULT_ROOT,
        help="Root directory. Defaults to the current directory.",
    )
    parser.add_argument(
        "-o",
        "-O",
        dest="output",
        metavar="FILE",
        default=None,
        help="Write the tree to FILE (UTF-8 with BOM) instead of the console. Also accepted as /o or /O.",
    )
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse ``argv``; a trailing output switch with no file becomes the root path."""
    if argv is None:
        argv = sys.argv[1:]
    normalized, dangling_switch = _normalize_output_switches(argv)
    args = build_parser().parse_args(normalized)
    if dangling_switch is not None:
        args.path = dangling_switch
    return args


def validate_root(root: Path) -> None:
    """Raise ``SystemExit`` unless ``root`` exists and is a directory."""
    if not root.exists():
        raise SystemExit(f"Error : File not found. [{root}]")
    if not root.is_dir():
        raise SystemExit(f"Error : The specified path is not a directory. [{root}]")


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and print the tree for the requested root.

    Fatal startup conditions exit with status 1 and a message on stderr.
    Unreadable subdirectories are annotated inline and never abort the run.
    """
    args = parse_args(argv)
    root = Path(args.path)
    validate_root(root)

    if args.output is None:
        with console_sink() as sink:
            render_tree(sink, root, args.path)
        return

    output_path = Path(args.output)
    try:
        file_sink = open_file_sink(output_path)
    except OSError as exc:
        raise SystemExit(f"Error : The file cannot be opened.[{output_path}]\n{exc.strerror or exc}") from exc
    with file_sink as sink:
        render_tree(sink, root, args.path)

    print(f"The results have been output to\n    {output_path}.")


if __name__ == "__main__":
    main()
