# tests/test_fizzbuzzer.py
"""
Tests for FizzBuzzer classification and delegation.
"""

import threading

import pytest

from fizzbuzzer import fizzbuzz
from fizzbuzzer.core.dictionary import DivisibilityCase
from fizzbuzzer.core.exceptions import (
    DictionaryConstructionError,
    FizzBuzzerError,
    MissingCapabilityError,
)
from fizzbuzzer.core.fizzbuzzer import FizzBuzzer
from fizzbuzzer.dictionaries.plugins.functions import FunctionFizzBuzzDictionary
from fizzbuzzer.dictionaries.plugins.standard import StandardFizzBuzzDictionary

pytestmark = pytest.mark.tier1


def get_fizzbuzzer_with_standard_dictionary(by_three, by_five, by_three_and_five):
    dictionary = StandardFizzBuzzDictionary(by_three, by_five, by_three_and_five)
    return FizzBuzzer(dictionary)


class RecordingDictionary:
    """Records which label function was called with which value."""

    def __init__(self):
        self.calls = []

    def divisible_by_three(self, value):
        self.calls.append(("three", value))
        return "three"

    def divisible_by_five(self, value):
        self.calls.append(("five", value))
        return "five"

    def divisible_by_three_and_five(self, value):
        self.calls.append(("both", value))
        return "both"

    def indivisible(self, value):
        self.calls.append(("none", value))
        return "none"


# =============================================================================
# Concrete results
# =============================================================================


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, "FizzBuzz"),
        (1, "1"),
        (2, "2"),
        (3, "Fizz"),
        (4, "4"),
        (5, "Buzz"),
        (6, "Fizz"),
        (7, "7"),
        (10, "Buzz"),
        (15, "FizzBuzz"),
        (20, "Buzz"),
        (21, "Fizz"),
        (30, "FizzBuzz"),
    ],
)
def test_fizzbuzzer_produces_correct_results_in_english(value, expected):
    fizzbuzzer = get_fizzbuzzer_with_standard_dictionary("Fizz", "Buzz", "FizzBuzz")

    assert fizzbuzzer.execute(value) == expected


def test_divisibility_properties_hold_over_a_range(english_fizzbuzzer):
    for n in range(0, 301):
        result = english_fizzbuzzer.execute(n)
        if n % 15 == 0:
            assert result == "FizzBuzz"
        elif n % 3 == 0:
            assert result == "Fizz"
        elif n % 5 == 0:
            assert result == "Buzz"
        else:
            assert result == str(n)


@pytest.mark.parametrize(
    "value, expected",
    [(-1, "-1"), (-3, "Fizz"), (-5, "Buzz"), (-15, "FizzBuzz"), (-7, "-7")],
)
def test_negative_values_classify_like_their_magnitude(english_fizzbuzzer, value, expected):
    assert english_fizzbuzzer.execute(value) == expected


def test_large_values(english_fizzbuzzer):
    assert english_fizzbuzzer.execute(10**30) == "Buzz"
    assert english_fizzbuzzer.execute(3 * 10**30) == "FizzBuzz"
    assert english_fizzbuzzer.execute(10**30 + 1) == str(10**30 + 1)


# =============================================================================
# Classification and delegation
# =============================================================================


@pytest.mark.parametrize(
    "value, case",
    [
        (15, DivisibilityCase.THREE_AND_FIVE),
        (9, DivisibilityCase.THREE),
        (25, DivisibilityCase.FIVE),
        (11, DivisibilityCase.INDIVISIBLE),
    ],
)
def test_classify(value, case):
    assert FizzBuzzer.classify(value) is case


def test_value_is_passed_through_to_matching_function():
    dictionary = RecordingDictionary()
    fizzbuzzer = FizzBuzzer(dictionary)

    assert [fizzbuzzer.execute(v) for v in (45, 6, 10, 8)] == ["both", "three", "five", "none"]
    assert dictionary.calls == [("both", 45), ("three", 6), ("five", 10), ("none", 8)]


def test_combined_case_calls_only_the_combined_function():
    dictionary = RecordingDictionary()
    FizzBuzzer(dictionary).execute(30)

    assert dictionary.calls == [("both", 30)]


def test_execute_is_idempotent(english_fizzbuzzer):
    results = {english_fizzbuzzer.execute(9) for _ in range(100)}
    assert results == {"Fizz"}


def test_labels_are_independent_between_dictionaries():
    english = get_fizzbuzzer_with_standard_dictionary("Fizz", "Buzz", "FizzBuzz")
    german = get_fizzbuzzer_with_standard_dictionary("Fiss", "Buss", "FissBuss")

    assert english.execute(9) == "Fizz"
    assert german.execute(9) == "Fiss"
    assert english.execute(9) == "Fizz"


def test_dictionary_cannot_be_reassigned(english_fizzbuzzer):
    with pytest.raises(AttributeError):
        english_fizzbuzzer.dictionary = RecordingDictionary()


def test_concurrent_execution_is_consistent(english_fizzbuzzer):
    expected = [english_fizzbuzzer.execute(n) for n in range(1, 1001)]
    results = {}

    def worker(idx):
        results[idx] = [english_fizzbuzzer.execute(n) for n in range(1, 1001)]

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert all(r == expected for r in results.values())


# =============================================================================
# Missing capabilities
# =============================================================================


def test_missing_function_fails_on_use():
    dictionary = FunctionFizzBuzzDictionary(
        divisible_by_three=lambda n: "Fizz",
        divisible_by_five=lambda n: "Buzz",
        indivisible=str,
    )
    fizzbuzzer = FizzBuzzer(dictionary)

    assert fizzbuzzer.execute(3) == "Fizz"

    with pytest.raises(MissingCapabilityError) as exc_info:
        fizzbuzzer.execute(15)

    assert exc_info.value.capability == "divisible_by_three_and_five"
    assert "divisible_by_three_and_five" in str(exc_info.value)


def test_missing_attribute_fails_on_use():
    class OnlyIndivisible:
        def indivisible(self, value):
            return str(value)

    fizzbuzzer = FizzBuzzer(OnlyIndivisible())

    assert fizzbuzzer.execute(7) == "7"
    with pytest.raises(MissingCapabilityError):
        fizzbuzzer.execute(5)


def test_non_callable_capability_is_missing():
    class Broken(RecordingDictionary):
        divisible_by_five = "Buzz"

    with pytest.raises(MissingCapabilityError) as exc_info:
        FizzBuzzer(Broken()).execute(5)

    assert exc_info.value.capability == "divisible_by_five"


def test_missing_capability_is_a_fizzbuzzer_error():
    assert issubclass(MissingCapabilityError, FizzBuzzerError)


# =============================================================================
# Construction by name
# =============================================================================


def test_from_name_builds_standard_dictionary():
    fizzbuzzer = FizzBuzzer.from_name(
        "standard", by_three="A", by_five="B", by_three_and_five="AB"
    )

    assert isinstance(fizzbuzzer.dictionary, StandardFizzBuzzDictionary)
    assert fizzbuzzer.execute(3) == "A"
    assert fizzbuzzer.execute(15) == "AB"


def test_module_level_fizzbuzz():
    assert fizzbuzz(1) == "1"
    assert fizzbuzz(3) == "Fizz"
    assert fizzbuzz(5) == "Buzz"
    assert fizzbuzz(15) == "FizzBuzz"
    assert fizzbuzz(6, by_three="Fuzz") == "Fuzz"


def test_from_name_with_wrong_kwargs_names_plugin_and_kwargs():
    with pytest.raises(DictionaryConstructionError) as exc_info:
        FizzBuzzer.from_name("functions", by_three="Fizz", by_five="Buzz")

    error = exc_info.value
    assert isinstance(error, FizzBuzzerError)
    assert error.plugin_name == "functions"
    assert error.kwargs == {"by_three": "Fizz", "by_five": "Buzz"}
    assert "'functions'" in str(error)
    assert "by_three" in str(error)


def test_from_name_with_missing_kwargs_is_a_construction_error():
    with pytest.raises(DictionaryConstructionError):
        FizzBuzzer.from_name("standard", by_three="Fizz")
