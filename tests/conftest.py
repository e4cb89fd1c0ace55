"""Shared fixtures for the pathstamp test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from pathstamp.lib import comments, config
from pathstamp.lib.logger import get_logger


@pytest.fixture(autouse=True)
def _isolated(monkeypatch: pytest.MonkeyPatch):
    """Fresh config and comment table, no log override, no leftover handlers."""
    monkeypatch.delenv("PATHSTAMP_LOG", raising=False)
    config.reset()
    comments.reset()
    yield
    logger = get_logger()
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    config.reset()
    comments.reset()


@pytest.fixture()
def project(tmp_path: Path) -> Path:
    """Create a small source tree under a temporary root."""
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "lib.rs").write_text("fn main() {}\n", encoding="utf-8")
    (tmp_path / "src" / "util.py").write_text("import os\n\nprint(os.sep)\n", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("# notes.txt\nhello\n", encoding="utf-8")
    (tmp_path / "scripts").mkdir()
    (tmp_path / "scripts" / "run.sh").write_text("echo hi\n", encoding="utf-8")
    return tmp_path


@pytest.fixture()
def in_project(project: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test with the project root as the working directory."""
    monkeypatch.chdir(project)
    return project
