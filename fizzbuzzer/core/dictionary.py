# fizzbuzzer/core/dictionary.py
"""
FizzBuzzDictionary Protocol - the label capability set.

A dictionary supplies one label function per divisibility case. Any object
exposing the four callables below can be injected into a FizzBuzzer; the
standard variant lives in fizzbuzzer.dictionaries.plugins.standard.
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol, runtime_checkable


class DivisibilityCase(str, Enum):
    """
    The four mutually exclusive divisibility outcomes.

    Each value is the name of the dictionary capability that labels it.
    """

    THREE_AND_FIVE = "divisible_by_three_and_five"
    THREE = "divisible_by_three"
    FIVE = "divisible_by_five"
    INDIVISIBLE = "indivisible"


@runtime_checkable
class FizzBuzzDictionary(Protocol):
    """
    Protocol for label dictionaries.

    Plugins typically live in:
        fizzbuzzer.dictionaries.plugins.<name>

    and declare a unique:
        plugin_name: str
    """

    def divisible_by_three(self, value: int) -> str:
        """Label for values divisible by three only."""
        ...

    def divisible_by_five(self, value: int) -> str:
        """Label for values divisible by five only."""
        ...

    def divisible_by_three_and_five(self, value: int) -> str:
        """Label for values divisible by both three and five."""
        ...

    def indivisible(self, value: int) -> str:
        """Label for values divisible by neither."""
        ...
