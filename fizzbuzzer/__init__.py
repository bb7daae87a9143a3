"""
FizzBuzzer - parameterized FizzBuzz with pluggable label dictionaries.

A FizzBuzzer classifies an integer by divisibility by three and five and
asks an injected dictionary for the matching label.

Quick Start:
    >>> from fizzbuzzer import fizzbuzz
    >>> fizzbuzz(15)
    'FizzBuzz'

Custom labels:
    >>> from fizzbuzzer import FizzBuzzer, StandardFizzBuzzDictionary
    >>> fizzbuzzer = FizzBuzzer(StandardFizzBuzzDictionary("Fizz", "Buzz", "FizzBuzz"))
    >>> [fizzbuzzer.execute(i) for i in range(1, 6)]
    ['1', '2', 'Fizz', '4', 'Buzz']

Architecture:
    fizzbuzzer/
    ├── core/              # Evaluator, dictionary protocol, registry, errors
    ├── dictionaries/      # Dictionary plugins (standard, functions)
    ├── config/            # YAML defaults + pydantic schema
    ├── runtime/           # Console driver
    ├── logging/           # Logger setup and tags
    └── cli/               # Typer application
"""

__version__ = "0.1.0"

from fizzbuzzer.core import (
    DictionaryConstructionError,
    DivisibilityCase,
    FizzBuzzDictionary,
    FizzBuzzer,
    FizzBuzzerError,
    MissingCapabilityError,
)
from fizzbuzzer.dictionaries import FunctionFizzBuzzDictionary, StandardFizzBuzzDictionary


def fizzbuzz(
    value: int,
    by_three: str = "Fizz",
    by_five: str = "Buzz",
    by_three_and_five: str = "FizzBuzz",
) -> str:
    """
    Label a single value with the standard dictionary.

    Module-level convenience for one-off calls; build a FizzBuzzer directly
    to reuse a dictionary.
    """
    dictionary = StandardFizzBuzzDictionary(by_three, by_five, by_three_and_five)
    return FizzBuzzer(dictionary).execute(value)


__all__ = [
    "__version__",
    "FizzBuzzer",
    "FizzBuzzDictionary",
    "DivisibilityCase",
    "StandardFizzBuzzDictionary",
    "FunctionFizzBuzzDictionary",
    "FizzBuzzerError",
    "MissingCapabilityError",
    "DictionaryConstructionError",
    "fizzbuzz",
]
