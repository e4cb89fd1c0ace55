"""Data models for pathstamp.

Typed, frozen dataclasses for values derived while annotating a file.
Nothing here is persisted; every instance lives for a single ``annotate``
call.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AnnotationDecision:
    """Outcome of inspecting a file's first line.

    Attributes:
        comment_text: The full comment line, ``"<prefix> <relative_path>\\n"``.
        already_present: True if the file already starts with that comment.
    """

    comment_text: str
    already_present: bool
