# fizzbuzzer/dictionaries/plugins/functions.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, ClassVar, Optional

LabelFunction = Callable[[int], str]


@dataclass(frozen=True)
class FunctionFizzBuzzDictionary:
    """
    Caller-supplied label functions, one per divisibility case.

    Any function may be left as None; FizzBuzzer raises
    MissingCapabilityError when a value lands on that case.

    Example:
        >>> dictionary = FunctionFizzBuzzDictionary(
        ...     divisible_by_three=lambda n: f"{n // 3}x3",
        ...     divisible_by_five=lambda n: f"{n // 5}x5",
        ...     divisible_by_three_and_five=lambda n: f"{n // 15}x15",
        ...     indivisible=str,
        ... )
    """

    plugin_name: ClassVar[str] = "functions"

    divisible_by_three: Optional[LabelFunction] = None
    divisible_by_five: Optional[LabelFunction] = None
    divisible_by_three_and_five: Optional[LabelFunction] = None
    indivisible: Optional[LabelFunction] = None
