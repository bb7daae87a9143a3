# fizzbuzzer/core/exceptions.py
"""
Standard error hierarchy for FizzBuzzer.

Every error raised by the evaluator derives from FizzBuzzerError. These are
programming or configuration defects, never runtime conditions to recover
from, so nothing in the core catches them.
"""

from __future__ import annotations


class FizzBuzzerError(Exception):
    """Base error for FizzBuzzer."""

    pass


class MissingCapabilityError(FizzBuzzerError):
    """Raised when a dictionary lacks a label function the evaluator needs."""

    def __init__(self, capability: str, dictionary: object = None):
        self.capability = capability
        self.dictionary = dictionary
        owner = type(dictionary).__name__ if dictionary is not None else "dictionary"
        super().__init__(f"{owner} has no callable {capability!r} label function")


class DictionaryConstructionError(FizzBuzzerError):
    """Raised when a dictionary plugin rejects the kwargs it was built with."""

    def __init__(self, plugin_name: str, kwargs: dict, reason: str):
        self.plugin_name = plugin_name
        self.kwargs = kwargs
        super().__init__(
            f"Cannot build {plugin_name!r} dictionary from kwargs "
            f"{sorted(kwargs)}: {reason}"
        )
