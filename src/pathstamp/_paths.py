"""Centralized path resolution for the pathstamp package.

This is the ONLY module that touches __file__ or computes directory paths
for packaged data.  Every other module imports from here.
"""

from pathlib import Path

_PACKAGE_DIR = Path(__file__).resolve().parent


def config_dir() -> Path:
    """Return the config/ directory path."""
    return _PACKAGE_DIR / "config"


def defaults_path() -> Path:
    """Return the path to config/defaults.yaml."""
    return config_dir() / "defaults.yaml"


def cli_dir() -> Path:
    """Return the cli/ directory path."""
    from pathstamp.lib.config import get_str

    return _PACKAGE_DIR / get_str("directories.cli")


def theme_path() -> Path:
    """Return the path to cli/theme.yaml."""
    from pathstamp.lib.config import get_str

    return cli_dir() / get_str("filenames.theme")
