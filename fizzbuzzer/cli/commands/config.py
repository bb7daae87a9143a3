# fizzbuzzer/cli/commands/config.py
"""
Config command: show the merged configuration.

Usage:
    fizzbuzzer config
    fizzbuzzer config --config my.yaml
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
import yaml

from fizzbuzzer.cli.utils import load_config_or_exit
from fizzbuzzer.config.loader import get_config_source


def command(config_path: Optional[Path] = None) -> None:
    config = load_config_or_exit(config_path)

    typer.echo(f"# Source: {get_config_source(config_path)}")
    typer.echo(yaml.safe_dump(config.model_dump(), sort_keys=False).rstrip())
