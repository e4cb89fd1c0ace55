"""expand: turn one shell glob pattern into concrete paths.

Uses the standard library ``glob`` module with ``**`` recursion enabled and
hidden files included, so ``src/**/*.rs`` and ``*`` behave the way a shell
user expects.  Matches are sorted so repeated runs visit files in the same
order.
"""

from __future__ import annotations

import glob
from pathlib import Path

from pathstamp.exceptions import GlobPatternError


def expand_pattern(pattern: str) -> list[Path]:
    """Expand ``pattern`` relative to the current working directory.

    Args:
        pattern: Shell-style glob, e.g. ``"src/**/*.py"``.

    Returns:
        Sorted list of matching paths.  Empty when nothing matches.

    Raises:
        GlobPatternError: If the pattern cannot be expanded (for example it
            contains a NUL byte, or a directory on its path is unreadable).
    """
    try:
        matches = glob.glob(pattern, recursive=True, include_hidden=True)
    except (OSError, ValueError) as exc:
        raise GlobPatternError(pattern, exc) from exc
    return [Path(match) for match in sorted(matches)]
