# fizzbuzzer/dictionaries/__init__.py
"""Label dictionaries shipped with FizzBuzzer."""

from fizzbuzzer.dictionaries.plugins.functions import FunctionFizzBuzzDictionary
from fizzbuzzer.dictionaries.plugins.standard import StandardFizzBuzzDictionary

__all__ = ["StandardFizzBuzzDictionary", "FunctionFizzBuzzDictionary"]
