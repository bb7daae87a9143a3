# fizzbuzzer/cli/commands/run.py
"""
Run command: the console driver.

Usage:
    fizzbuzzer run
    fizzbuzzer run --start 1 --stop 100
    fizzbuzzer run --config my.yaml --wait
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

import typer

from fizzbuzzer.cli.utils import CLI_ERRORS, error, load_config_or_exit, setup_logging
from fizzbuzzer.config.schema import FizzBuzzerConfig
from fizzbuzzer.core.config import validate_config
from fizzbuzzer.logging.logger import get_logger
from fizzbuzzer.logging.tags import CLI
from fizzbuzzer.runtime.runner import run

logger = get_logger(__name__)


def _apply_overrides(
    config: FizzBuzzerConfig,
    start: Optional[int],
    stop: Optional[int],
    plugin: Optional[str],
    wait: Optional[bool],
) -> FizzBuzzerConfig:
    """Apply command-line overrides and re-validate."""
    run_overrides: Dict[str, Any] = {}
    if start is not None:
        run_overrides["start"] = start
    if stop is not None:
        run_overrides["stop"] = stop
    if wait is not None:
        run_overrides["wait_for_input"] = wait

    data = config.model_dump()
    data["run"].update(run_overrides)
    if plugin is not None and plugin != data["dictionary"]["plugin_name"]:
        # Configured kwargs belong to the configured plugin.
        data["dictionary"] = {"plugin_name": plugin, "kwargs": {}}

    return validate_config(data, FizzBuzzerConfig)


def command(
    config_path: Optional[Path] = None,
    start: Optional[int] = None,
    stop: Optional[int] = None,
    plugin: Optional[str] = None,
    wait: Optional[bool] = None,
    verbose: bool = False,
) -> None:
    setup_logging(verbose)

    config = load_config_or_exit(config_path)

    try:
        config = _apply_overrides(config, start, stop, plugin, wait)
        count = run(config, echo=typer.echo)
    except CLI_ERRORS as e:
        error(str(e))
        raise typer.Exit(1)

    logger.debug(f"{CLI} run finished after {count} value(s)")

    if config.run.wait_for_input:
        typer.get_text_stream("stdin").readline()
