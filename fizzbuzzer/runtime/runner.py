# fizzbuzzer/runtime/runner.py
"""
Runner - drives a FizzBuzzer over a range of values.

The core never does I/O; everything printed lives here. With the package
defaults this reproduces the classic console program: lines "1 = 1" through
"10000 = Buzz", then "Fin!".
"""

from __future__ import annotations

from typing import Callable, Iterator, Optional, Tuple

from fizzbuzzer.config.loader import load_fizzbuzzer_config
from fizzbuzzer.config.schema import FizzBuzzerConfig
from fizzbuzzer.core.fizzbuzzer import FizzBuzzer
from fizzbuzzer.logging.logger import get_logger
from fizzbuzzer.logging.tags import RUNNER

logger = get_logger(__name__)


def create_fizzbuzzer(config: FizzBuzzerConfig) -> FizzBuzzer:
    """Build a FizzBuzzer from the configured dictionary plugin."""
    fizzbuzzer = FizzBuzzer.from_name(
        config.dictionary.plugin_name, **config.dictionary.kwargs
    )
    logger.debug(
        f"{RUNNER} Using {type(fizzbuzzer.dictionary).__name__} "
        f"({config.dictionary.plugin_name!r})"
    )
    return fizzbuzzer


def iter_results(
    fizzbuzzer: FizzBuzzer, start: int, stop: int
) -> Iterator[Tuple[int, str]]:
    """Yield (value, result) for start..stop inclusive."""
    for value in range(start, stop + 1):
        yield value, fizzbuzzer.execute(value)


def format_line(value: int, result: str, line_format: str) -> str:
    return line_format.format(value=value, result=result)


def run(
    config: Optional[FizzBuzzerConfig] = None,
    echo: Callable[[str], None] = print,
) -> int:
    """
    Evaluate every value in the configured range and echo one line each,
    followed by the farewell line.

    Returns:
        Number of values evaluated.
    """
    if config is None:
        config = load_fizzbuzzer_config()
    fizzbuzzer = create_fizzbuzzer(config)

    logger.info(f"{RUNNER} Evaluating {config.run.start}..{config.run.stop}")

    count = 0
    for value, result in iter_results(fizzbuzzer, config.run.start, config.run.stop):
        echo(format_line(value, result, config.run.line_format))
        count += 1

    echo(config.run.farewell)
    logger.info(f"{RUNNER} Evaluated {count} value(s)")
    return count
