# fizzbuzzer/core/__init__.py
"""
FizzBuzzer Core - the evaluator and its dictionary contract.

Public API:
    - FizzBuzzer: Classifies integers and delegates to a dictionary
    - FizzBuzzDictionary: Protocol that all label dictionaries implement
    - DivisibilityCase: The four divisibility outcomes
    - Exceptions: FizzBuzzerError, MissingCapabilityError

Examples:
    >>> from fizzbuzzer.core import FizzBuzzer
    >>> from fizzbuzzer.dictionaries import StandardFizzBuzzDictionary
    >>> fizzbuzzer = FizzBuzzer(StandardFizzBuzzDictionary("Fizz", "Buzz", "FizzBuzz"))
    >>> fizzbuzzer.execute(9)
    'Fizz'
"""

from .dictionary import DivisibilityCase, FizzBuzzDictionary
from .exceptions import DictionaryConstructionError, FizzBuzzerError, MissingCapabilityError
from .fizzbuzzer import FizzBuzzer

__all__ = [
    "FizzBuzzer",
    "FizzBuzzDictionary",
    "DivisibilityCase",
    "FizzBuzzerError",
    "MissingCapabilityError",
    "DictionaryConstructionError",
]
