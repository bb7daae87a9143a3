# fizzbuzzer/cli/commands/evaluate.py
"""
Eval command: label individual values.

Usage:
    fizzbuzzer eval 3 5 15
    fizzbuzzer eval 9 --fizz Fuzz
"""

from __future__ import annotations

from typing import List

import typer

from fizzbuzzer.cli.utils import setup_logging
from fizzbuzzer.core.fizzbuzzer import FizzBuzzer
from fizzbuzzer.dictionaries.plugins.standard import StandardFizzBuzzDictionary


def command(
    values: List[int],
    fizz: str = "Fizz",
    buzz: str = "Buzz",
    fizzbuzz: str = "FizzBuzz",
    verbose: bool = False,
) -> None:
    setup_logging(verbose)

    fizzbuzzer = FizzBuzzer(StandardFizzBuzzDictionary(fizz, buzz, fizzbuzz))

    for value in values:
        typer.echo(fizzbuzzer.execute(value))
