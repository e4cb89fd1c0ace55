"""Unit tests for pathstamp.lib.expand glob expansion."""

from __future__ import annotations

import glob
from pathlib import Path

import pytest

from pathstamp.exceptions import GlobPatternError
from pathstamp.lib.expand import expand_pattern


class TestExpandPattern:
    """Tests for pattern expansion relative to the working directory."""

    def test_simple_wildcard(self, in_project: Path) -> None:
        """A flat wildcard matches files in the working directory."""
        assert expand_pattern("*.txt") == [Path("notes.txt")]

    def test_recursive(self, in_project: Path) -> None:
        """** descends into subdirectories."""
        assert expand_pattern("**/*.rs") == [Path("src/lib.rs")]

    def test_sorted(self, in_project: Path) -> None:
        """Matches come back sorted."""
        (in_project / "src" / "a.py").write_text("", encoding="utf-8")
        assert expand_pattern("src/*.py") == [Path("src/a.py"), Path("src/util.py")]

    def test_no_match(self, in_project: Path) -> None:
        """A pattern matching nothing yields an empty list."""
        assert expand_pattern("*.nomatch") == []

    def test_hidden_files_included(self, in_project: Path) -> None:
        """Wildcards match dotfiles."""
        (in_project / ".env.sh").write_text("", encoding="utf-8")
        assert Path(".env.sh") in expand_pattern("*.sh")

    def test_directories_returned(self, in_project: Path) -> None:
        """Directories are returned too; the annotator skips them."""
        assert Path("src") in expand_pattern("*")

    def test_absolute_pattern(self, project: Path) -> None:
        """Absolute patterns yield absolute paths."""
        assert expand_pattern(str(project / "scripts" / "*.sh")) == [
            project / "scripts" / "run.sh"
        ]

    def test_expansion_failure_raises(self, in_project: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Errors from the glob machinery surface as GlobPatternError."""

        def boom(*args, **kwargs):
            raise PermissionError("denied")

        monkeypatch.setattr(glob, "glob", boom)
        with pytest.raises(GlobPatternError) as info:
            expand_pattern("locked/*")
        assert info.value.pattern == "locked/*"
        assert isinstance(info.value.original_error, PermissionError)
        assert "locked/*" in str(info.value)
