# fizzbuzzer/logging/logger.py
"""
Logger setup for FizzBuzzer.

Library modules only ever ask for a logger and emit tagged debug records:

    from fizzbuzzer.logging.logger import get_logger
    from fizzbuzzer.logging.tags import RUNNER

    logger = get_logger(__name__)
    logger.debug(f"{RUNNER} Evaluating 1..100")

Handlers are installed by the CLI alone, through configure_logging() or
level_for_verbosity(). Records always go to stderr so that `fizzbuzzer run`
output on stdout stays exactly "<value> = <label>" lines.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Optional

DEFAULT_FORMAT = "[%(levelname)s] %(name)s — %(message)s"

# `fizzbuzzer run` is quiet unless --verbose is given.
QUIET_LEVEL = logging.WARNING
VERBOSE_LEVEL = logging.DEBUG


def level_for_verbosity(verbose: bool) -> int:
    """Map the CLI --verbose flag to a root logger level."""
    return VERBOSE_LEVEL if verbose else QUIET_LEVEL


def configure_logging(
    level: int = QUIET_LEVEL,
    fmt: str = DEFAULT_FORMAT,
    stream: Optional[IO[str]] = None,
) -> None:
    """
    Install the stderr handler on the root logger and set its level.

    Every CLI command calls this on entry; a handler is only added when the
    root logger has none, so repeated commands in one process (tests invoking
    the app several times) do not print each record twice.
    """
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(logging.Formatter(fmt))
        root.addHandler(handler)

    root.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Logger for a fizzbuzzer module; pass ``__name__``."""
    return logging.getLogger(name)
