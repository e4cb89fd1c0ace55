"""pathstamp: stamp files with a comment naming their own path.

Stable public API:
    annotate: Prepend the path comment to one file if it is missing.
    build_comment: Compute the comment line for a file.
    comment_prefix: Look up the comment prefix for a file's extension.
    AnnotationDecision: Dataclass describing the first-line check.
    AnnotationIOError: Exception raised when a file cannot be rewritten.
    GlobPatternError: Exception raised when a pattern cannot be expanded.
    InvalidInvocationError: Exception raised when no pattern is given.
    PathstampError: Base class of every pathstamp exception.
"""

__version__ = "0.2.0"

from pathstamp.annotator import annotate, build_comment
from pathstamp.exceptions import (
    AnnotationIOError,
    GlobPatternError,
    InvalidInvocationError,
    PathstampError,
)
from pathstamp.lib.comments import comment_prefix
from pathstamp.lib.models import AnnotationDecision

__all__ = [
    "__version__",
    "annotate",
    "build_comment",
    "comment_prefix",
    "AnnotationDecision",
    "AnnotationIOError",
    "GlobPatternError",
    "InvalidInvocationError",
    "PathstampError",
]
