# fizzbuzzer/core/fizzbuzzer.py
"""
FizzBuzzer - classifies integers and delegates labelling to a dictionary.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from fizzbuzzer.core.dictionary import DivisibilityCase, FizzBuzzDictionary
from fizzbuzzer.core.exceptions import DictionaryConstructionError, MissingCapabilityError
from fizzbuzzer.core.registry import get_dictionary_plugin
from fizzbuzzer.logging.logger import get_logger
from fizzbuzzer.logging.tags import FIZZBUZZ

logger = get_logger(__name__)


@dataclass(frozen=True)
class FizzBuzzer:
    """
    Thin evaluator around a label dictionary.

    Responsibilities:
    - Hold a concrete dictionary (set once, never reassigned)
    - Classify a value into exactly one DivisibilityCase
    - Return whatever the matching label function produces

    Usage patterns:

        # Direct dictionary use
        from fizzbuzzer.dictionaries.plugins.standard import StandardFizzBuzzDictionary
        fizzbuzzer = FizzBuzzer(StandardFizzBuzzDictionary("Fizz", "Buzz", "FizzBuzz"))
        fizzbuzzer.execute(15)  # "FizzBuzz"

        # Dictionary by plugin name
        fizzbuzzer = FizzBuzzer.from_name("standard", by_three="Fizz", by_five="Buzz",
                                          by_three_and_five="FizzBuzz")

    Remainders use Python's floored ``%``. Divisibility by a positive modulus
    does not depend on the sign of the value, so -15 is FizzBuzz and -7 is
    indivisible.
    """

    dictionary: FizzBuzzDictionary

    @classmethod
    def from_name(cls, name: str, **dictionary_kwargs: Any) -> "FizzBuzzer":
        """
        Build a FizzBuzzer around the dictionary plugin registered as ``name``.

        Raises:
            PluginNotFoundError: If no plugin has that name
            DictionaryConstructionError: If the plugin rejects the kwargs
        """
        dictionary_cls = get_dictionary_plugin(name)
        try:
            dictionary = dictionary_cls(**dictionary_kwargs)
        except TypeError as e:
            raise DictionaryConstructionError(name, dictionary_kwargs, str(e)) from e
        return cls(dictionary=dictionary)

    @staticmethod
    def classify(value: int) -> DivisibilityCase:
        """Return the divisibility case for ``value``. Combined case wins."""
        div3 = value % 3 == 0
        div5 = value % 5 == 0

        if div3 and div5:
            return DivisibilityCase.THREE_AND_FIVE
        if div3:
            return DivisibilityCase.THREE
        if div5:
            return DivisibilityCase.FIVE
        return DivisibilityCase.INDIVISIBLE

    def execute(self, value: int) -> str:
        """
        Label ``value`` using the injected dictionary.

        Raises:
            MissingCapabilityError: If the matching label function is absent
                or not callable.
        """
        case = self.classify(value)
        label_fn = getattr(self.dictionary, case.value, None)
        if label_fn is None or not callable(label_fn):
            raise MissingCapabilityError(case.value, self.dictionary)

        result = label_fn(value)
        logger.debug(f"{FIZZBUZZ} {value} -> {case.name} -> {result!r}")
        return result
