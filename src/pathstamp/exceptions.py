"""Custom exceptions for pathstamp.

Defines the exception hierarchy used by the annotator, the glob expansion
helper, and the CLI.  All exceptions are importable from the top-level
``pathstamp`` package and derive from ``PathstampError``.

Exceptions:
    InvalidInvocationError: Raised when the CLI is invoked without any
        glob pattern.  Fatal: nothing is touched.
    GlobPatternError: Raised when a single pattern cannot be expanded.
        The CLI logs it and moves on to the next pattern.
    AnnotationIOError: Raised when a file cannot be read, decoded, or
        written.  Subclasses OSError.  Fatal for the whole run.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

from pathstamp.lib import config


class PathstampError(Exception):
    """Base class for every error raised by pathstamp."""


class InvalidInvocationError(PathstampError):
    """Raised when no glob patterns were supplied."""

    def __init__(self) -> None:
        super().__init__(config.get_str("messages.no_patterns"))


class GlobPatternError(PathstampError):
    """Raised when a glob pattern fails to expand.

    Carries the offending pattern so the caller can report it and continue
    with the remaining patterns.
    """

    def __init__(self, pattern: str, original_error: Exception) -> None:
        """Initialize with pattern error details.

        Args:
            pattern: The glob pattern that failed.
            original_error: The underlying exception from the glob machinery.
        """
        self.pattern = pattern
        self.original_error = original_error
        msg = config.get_str("messages.glob_error")
        super().__init__(msg.format(pattern=pattern, error=original_error))


class AnnotationIOError(PathstampError, OSError):
    """Raised when a file cannot be opened, read, decoded, or rewritten.

    Also an OSError, so callers catching filesystem errors see it too.  The
    errno of the underlying error is carried over when there is one.

    Files already annotated earlier in the run are left as they are; the
    failing file itself is untouched unless the failure happened mid-write.
    """

    def __init__(self, filepath: Union[str, Path], original_error: Exception) -> None:
        """Initialize with I/O error details.

        Args:
            filepath: Path to the file that could not be processed.
            original_error: The underlying OSError or UnicodeDecodeError.
        """
        self.filepath = str(filepath)
        self.original_error = original_error
        msg = config.get_str("messages.io_error")
        super().__init__(msg.format(filepath=self.filepath, error=original_error))
        self.errno = getattr(original_error, "errno", None)
