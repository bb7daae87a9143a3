# fizzbuzzer/cli/commands/plugins.py
"""
Plugins command: show available dictionary plugins.

Usage:
    fizzbuzzer plugins
"""

from __future__ import annotations

import typer

from fizzbuzzer.core.registry import available_dictionary_plugins, get_dictionary_plugin


def command() -> None:
    typer.echo()
    typer.echo("=" * 60)
    typer.echo("AVAILABLE DICTIONARY PLUGINS")
    typer.echo("=" * 60)

    names = available_dictionary_plugins()
    if not names:
        typer.echo("  (No dictionary plugins found)")
        return

    for name in names:
        cls = get_dictionary_plugin(name)
        doc = cls.__doc__ or "No description"
        desc = doc.strip().split("\n")[0]
        typer.echo(f"  • {name:15} {cls.__name__}")
        typer.echo(f"    {desc}")
