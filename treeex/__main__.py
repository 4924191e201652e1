"""Module entrypoint for ``python -m treeex``.

This keeps module-mode execution behavior identical to the console script.
All argument parsing and validation happen in ``treeex.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
