"""pathstamp annotator: prepend a path comment to a single file.

``annotate`` is the one operation that touches file contents.  It computes
``"<prefix> <relative_path>\\n"`` for the file, compares it with the current
first line, and when they differ rewrites the file as the comment followed by
every original line, the old first line included.

Design notes:
    The original content is re-joined line by line with ``\\n``.  CRLF
    bodies therefore come out as LF and the final line terminator is dropped.
    The rewrite is a plain truncate-and-write; an interruption mid-write
    leaves a partial file.
"""

from __future__ import annotations

import itertools
from pathlib import Path
from typing import Iterable, Union

from pathstamp.exceptions import AnnotationIOError
from pathstamp.lib import config
from pathstamp.lib.comments import comment_prefix
from pathstamp.lib.models import AnnotationDecision

PathLike = Union[str, Path]


def relative_display(root_dir: PathLike, file_path: PathLike) -> str:
    """Return ``file_path`` relative to ``root_dir`` for display.

    The check is purely lexical.  Paths outside ``root_dir`` (including
    relative paths when ``root_dir`` is absolute) are returned unchanged.
    """
    path = Path(file_path)
    try:
        return path.relative_to(root_dir).as_posix()
    except ValueError:
        return str(path)


def build_comment(root_dir: PathLike, file_path: PathLike) -> str:
    """Return the full comment line, newline included, for ``file_path``."""
    return f"{comment_prefix(file_path)} {relative_display(root_dir, file_path)}\n"


def decide(root_dir: PathLike, file_path: PathLike, first_line: str) -> AnnotationDecision:
    """Compare a file's current first line with the comment it should carry.

    Args:
        root_dir: Base directory used to relativize ``file_path``.
        file_path: The file being annotated.
        first_line: The file's first line as read, terminator included.
            Empty for an empty file.

    Returns:
        AnnotationDecision with the comment text and whether it is already
        in place.  Surrounding whitespace is ignored on both sides.
    """
    comment = build_comment(root_dir, file_path)
    present = bool(first_line) and first_line.strip() == comment.strip()
    return AnnotationDecision(comment_text=comment, already_present=present)


def join_lines(lines: Iterable[str]) -> str:
    """Join raw ``\\n``-terminated lines with single ``\\n`` separators.

    Each line loses its ``\\n`` and at most one ``\\r`` before it.  No
    terminator is added after the last line.
    """
    stripped = []
    for line in lines:
        if line.endswith("\n"):
            line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
        stripped.append(line)
    return "\n".join(stripped)


def annotate(root_dir: PathLike, file_path: PathLike) -> bool:
    """Ensure ``file_path`` starts with its path comment.

    Args:
        root_dir: Base directory used to relativize ``file_path``.
        file_path: The file to annotate.  Need not exist.

    Returns:
        True if the file was rewritten, False if it was skipped (not a
        regular file) or already annotated.

    Raises:
        AnnotationIOError: If the file cannot be opened, decoded, read, or
            written.
    """
    path = Path(file_path)
    if not path.is_file():
        return False

    encoding = config.get_str("defaults.encoding")
    try:
        # newline="\n": split on LF only and leave CR in place for join_lines.
        with open(path, "r", encoding=encoding, newline="\n") as fh:
            first_line = fh.readline()
            decision = decide(root_dir, path, first_line)
            if decision.already_present:
                return False
            remainder = join_lines(itertools.chain([first_line], fh)) if first_line else ""

        with open(path, "w", encoding=encoding, newline="") as fh:
            fh.write(decision.comment_text)
            fh.write(remainder)
    except (OSError, UnicodeError) as exc:
        raise AnnotationIOError(path, exc) from exc

    return True
