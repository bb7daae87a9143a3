# fizzbuzzer/cli/utils.py
"""
Shared CLI utilities.

Common functions used across multiple CLI commands.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from fizzbuzzer.config.loader import load_fizzbuzzer_config
from fizzbuzzer.config.schema import FizzBuzzerConfig
from fizzbuzzer.core.config import ConfigError
from fizzbuzzer.core.exceptions import FizzBuzzerError
from fizzbuzzer.core.registry import PluginRegistryError
from fizzbuzzer.logging.logger import configure_logging, level_for_verbosity

# Errors reported to the user as "Error: ..." with exit code 1.
CLI_ERRORS = (FizzBuzzerError, ConfigError, PluginRegistryError)


def setup_logging(verbose: bool) -> None:
    configure_logging(level=level_for_verbosity(verbose))


def error(msg: str) -> None:
    typer.secho(f"Error: {msg}", fg=typer.colors.RED, err=True)


def load_config_or_exit(config_path: Optional[Path]) -> FizzBuzzerConfig:
    """Load config or exit with a helpful message."""
    try:
        return load_fizzbuzzer_config(config_path)
    except ConfigError as e:
        error(str(e))
        raise typer.Exit(1)
