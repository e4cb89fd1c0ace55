"""comments: extension to comment-prefix lookup.

The table is read from ``comment_prefixes`` in ``config/defaults.yaml`` the
first time it is needed and handed out as a read-only ``MappingProxyType``.
Keys are lowercase extensions without the leading dot.  Any extension that is
missing from the table (including files with no extension at all) falls back
to ``defaults.comment_prefix``.
"""

from __future__ import annotations

import os
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional, Union

from pathstamp.lib import config

_TABLE: Optional[Mapping[str, str]] = None


def comment_table() -> Mapping[str, str]:
    """Return the shared, immutable extension-to-prefix table."""
    global _TABLE  # noqa: PLW0603
    if _TABLE is None:
        raw = config.get_dict("comment_prefixes")
        _TABLE = MappingProxyType(
            {str(ext).lower(): str(prefix) for ext, prefix in raw.items()}
        )
    return _TABLE


def extension_of(file_path: Union[str, Path]) -> str:
    """Return the lowercased text after the last dot of the base name.

    ``"lib.RS"`` gives ``"rs"``, ``"archive.tar.gz"`` gives ``"gz"``,
    ``"Makefile"`` gives ``""``.
    """
    name = os.path.basename(os.fspath(file_path))
    _, dot, ext = name.rpartition(".")
    return ext.lower() if dot else ""


def comment_prefix(file_path: Union[str, Path]) -> str:
    """Return the single-line comment prefix to use for ``file_path``."""
    fallback = config.get_str("defaults.comment_prefix")
    return comment_table().get(extension_of(file_path), fallback)


def reset() -> None:
    """Drop the cached table (used by tests)."""
    global _TABLE  # noqa: PLW0603
    _TABLE = None
