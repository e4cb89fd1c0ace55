"""config: lazy-loaded, typed accessor for pathstamp defaults.

Reads ``config/defaults.yaml`` on first access and caches the result for the
lifetime of the process.  Typed accessor helpers (``get_str``, ``get_int``,
``get_list``, ``get_dict``) enforce expected types at the call-site so that a
mistyped entry surfaces as a ``TypeError`` naming the key instead of a
confusing failure further down.  No module-level side effects.

Design notes:
    Every caller shares the same cached snapshot.  The ``reset()`` function
    exists solely for test isolation.
"""

from __future__ import annotations

from typing import Any

from pathstamp._paths import defaults_path
from pathstamp.lib.yaml_loader import load_yaml

_DEFAULTS: dict[str, Any] | None = None


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------


def load_defaults() -> dict[str, Any]:
    """Load and cache the defaults.yaml configuration file.

    Returns:
        The full configuration dictionary.

    Raises:
        FileNotFoundError: If defaults.yaml is missing.
        yaml.YAMLError: If defaults.yaml contains invalid YAML.
        TypeError: If defaults.yaml is not a mapping.
    """
    global _DEFAULTS  # noqa: PLW0603
    if _DEFAULTS is None:
        data = load_yaml(defaults_path())
        if not isinstance(data, dict):
            msg = f"defaults.yaml must be a YAML mapping, got {type(data).__name__}"
            raise TypeError(msg)
        _DEFAULTS = data
    return _DEFAULTS


# ---------------------------------------------------------------------------
# Accessors
# ---------------------------------------------------------------------------


def get(dotted_key: str) -> Any:
    """Access a nested config value using dot notation.

    Args:
        dotted_key: A dot-separated path like ``"exit_codes.ok"``.

    Returns:
        The value at the specified path.

    Raises:
        KeyError: If any segment of the path is missing.
    """
    parts = dotted_key.split(".")
    node: Any = load_defaults()
    for part in parts:
        if not isinstance(node, dict) or part not in node:
            msg = f"Config key not found: {dotted_key!r} (missing segment: {part!r})"
            raise KeyError(msg)
        node = node[part]
    return node


def _typed(dotted_key: str, expected: type) -> Any:
    value = get(dotted_key)
    # bool is an int subclass; a YAML ``true`` must not pass as an exit code.
    if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
        msg = f"Expected {expected.__name__} for {dotted_key!r}, got {type(value).__name__}"
        raise TypeError(msg)
    return value


def get_str(dotted_key: str) -> str:
    """Return a config value as a string.

    Raises:
        KeyError: If the key is missing.
        TypeError: If the value is not a string.
    """
    return _typed(dotted_key, str)


def get_int(dotted_key: str) -> int:
    """Return a config value as an integer.

    Raises:
        KeyError: If the key is missing.
        TypeError: If the value is not an integer.
    """
    return _typed(dotted_key, int)


def get_list(dotted_key: str) -> list[Any]:
    """Return a config value as a list.

    Raises:
        KeyError: If the key is missing.
        TypeError: If the value is not a list.
    """
    return _typed(dotted_key, list)


def get_dict(dotted_key: str) -> dict[str, Any]:
    """Return a config value as a mapping.

    Raises:
        KeyError: If the key is missing.
        TypeError: If the value is not a mapping.
    """
    return _typed(dotted_key, dict)


# ---------------------------------------------------------------------------
# Test utilities
# ---------------------------------------------------------------------------


def reset() -> None:
    """Clear the cached config (used by tests)."""
    global _DEFAULTS  # noqa: PLW0603
    _DEFAULTS = None
