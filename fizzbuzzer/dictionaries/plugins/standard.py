# fizzbuzzer/dictionaries/plugins/standard.py
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from fizzbuzzer.core.dictionary import FizzBuzzDictionary


@dataclass(frozen=True)
class StandardFizzBuzzDictionary(FizzBuzzDictionary):
    """Fixed labels for the divisible cases, the number itself otherwise."""

    plugin_name: ClassVar[str] = "standard"

    by_three: str
    by_five: str
    by_three_and_five: str

    def divisible_by_three(self, value: int) -> str:
        return self.by_three

    def divisible_by_five(self, value: int) -> str:
        return self.by_five

    def divisible_by_three_and_five(self, value: int) -> str:
        return self.by_three_and_five

    def indivisible(self, value: int) -> str:
        return str(value)
