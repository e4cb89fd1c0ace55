"""logger: console logging setup for the pathstamp CLI.

Configures the ``pathstamp`` logger with a single stderr handler.  The level
defaults to ``defaults.log_level`` and can be overridden through the
environment variable named by ``env_vars.log_level`` (``PATHSTAMP_LOG``).
Level names are coloured through the theme, which leaves them plain when
stderr is not a TTY.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any, Optional

from pathstamp.lib import config
from pathstamp.lib.theme import colorize


class ThemedFormatter(logging.Formatter):
    """Formatter that colours the level name by its semantic role."""

    def __init__(self, fmt: str, *, stream: Any = None) -> None:
        super().__init__(fmt, style="{")
        self._stream = stream

    def format(self, record: logging.LogRecord) -> str:
        plain = record.levelname
        record.levelname = colorize(plain, plain.lower(), stream=self._stream)
        try:
            return super().format(record)
        finally:
            record.levelname = plain


def get_logger() -> logging.Logger:
    """Return the package logger."""
    return logging.getLogger(config.get_str("logging.logger_name"))


def resolve_level(environ: Optional[dict[str, str]] = None) -> int:
    """Return the numeric log level from the environment override.

    An unset or empty variable yields the configured default.  An unknown
    name also yields the default, and a warning is emitted once the handler
    exists.
    """
    env = os.environ if environ is None else environ
    env_var = config.get_str("env_vars.log_level")
    default = config.get_str("defaults.log_level")
    requested = env.get(env_var, "").strip().lower() or default
    if requested not in config.get_list("logging.valid_levels"):
        requested = default
    return logging.getLevelName(requested.upper())


def setup_logging(stream: Any = None) -> logging.Logger:
    """Attach the themed stderr handler to the package logger.

    Calling this again replaces the previous handler instead of stacking a
    second one.

    Args:
        stream: Output stream for log records.  Defaults to sys.stderr.

    Returns:
        The configured package logger.
    """
    target = stream or sys.stderr
    logger = get_logger()
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(target)
    handler.setFormatter(ThemedFormatter(config.get_str("logging.format"), stream=target))
    logger.addHandler(handler)
    logger.setLevel(resolve_level())
    logger.propagate = False

    env_var = config.get_str("env_vars.log_level")
    raw = os.environ.get(env_var, "").strip().lower()
    if raw and raw not in config.get_list("logging.valid_levels"):
        logger.warning(
            config.get_str("messages.unknown_log_level").format(
                level=raw,
                env_var=env_var,
                fallback=config.get_str("defaults.log_level"),
            )
        )
    return logger
