# fizzbuzzer/cli/cli.py
"""
FizzBuzzer CLI - Main application.

Commands:
    fizzbuzzer run        Evaluate a range of values and print each label
    fizzbuzzer eval       Label the given values
    fizzbuzzer plugins    List available dictionary plugins
    fizzbuzzer config     Show the merged configuration
    fizzbuzzer version    Show version

NOTE: Commands use lazy loading - implementations are imported only when a
command is invoked.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer

app = typer.Typer(
    name="fizzbuzzer",
    help="FizzBuzzer - parameterized FizzBuzz with pluggable label dictionaries.",
    no_args_is_help=True,
    add_completion=False,
)


# =============================================================================
# LAZY COMMANDS
# =============================================================================


@app.command("run")
def run(
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="User config file."),
    start: Optional[int] = typer.Option(None, "--start", help="First value (overrides config)."),
    stop: Optional[int] = typer.Option(None, "--stop", help="Last value, inclusive (overrides config)."),
    plugin: Optional[str] = typer.Option(None, "--plugin", "-p", help="Dictionary plugin (overrides config)."),
    wait: Optional[bool] = typer.Option(None, "--wait/--no-wait", help="Wait for a line of input before exiting."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging."),
) -> None:
    """Print "<value> = <label>" for every value in range, then the farewell line."""
    from fizzbuzzer.cli.commands import run as mod

    mod.command(config_path=config_path, start=start, stop=stop, plugin=plugin, wait=wait, verbose=verbose)


@app.command("eval", context_settings={"ignore_unknown_options": True})
def eval_(
    values: List[int] = typer.Argument(..., help="Values to label."),
    fizz: str = typer.Option("Fizz", "--fizz", help="Label for multiples of three."),
    buzz: str = typer.Option("Buzz", "--buzz", help="Label for multiples of five."),
    fizzbuzz: str = typer.Option("FizzBuzz", "--fizzbuzz", help="Label for multiples of fifteen."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging."),
) -> None:
    """Label each VALUE with the standard dictionary. Negative values are accepted."""
    from fizzbuzzer.cli.commands import evaluate as mod

    mod.command(values=values, fizz=fizz, buzz=buzz, fizzbuzz=fizzbuzz, verbose=verbose)


@app.command("plugins")
def plugins() -> None:
    """List available dictionary plugins."""
    from fizzbuzzer.cli.commands import plugins as mod

    mod.command()


@app.command("config")
def config(
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="User config file."),
) -> None:
    """Show the merged configuration and where it came from."""
    from fizzbuzzer.cli.commands import config as mod

    mod.command(config_path=config_path)


@app.command("version")
def version() -> None:
    """Show version."""
    from fizzbuzzer import __version__

    typer.echo(f"fizzbuzzer version {__version__}")


if __name__ == "__main__":
    app()
