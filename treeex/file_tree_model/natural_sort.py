"""Natural-order sort key for entry names.

Digit runs compare by numeric value and text runs compare case-insensitively,
so ``file2`` sorts before ``file10`` and ``File1`` before both.
"""

from __future__ import annotations

import re

_DIGIT_RUN_RE = re.compile(r"(\d+)")


def natural_sort_key(name: str) -> tuple[tuple[str | int, ...], str]:
    """Return a total-order sort key for ``name``.

    ``re.split`` with a capturing group always yields text at even indices and
    digit runs at odd indices, so two keys never compare ``str`` against
    ``int``. The raw name is the final tie-break for names that only differ in
    case or leading zeros.
    """
    parts: list[str | int] = []
    for index, run in enumerate(_DIGIT_RUN_RE.split(name.casefold())):
        parts.append(int(run) if index % 2 else run)
    return tuple(parts), name


__all__ = [
    "natural_sort_key",
]
