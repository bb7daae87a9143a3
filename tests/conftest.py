# tests/conftest.py
"""
Root conftest - shared fixtures.

Test Tiers:
- tier1: Critical path tests - pure logic, no I/O
         Run: pytest -m tier1
- tier2: Unit tests touching files or the CLI runner
         Run: pytest -m "tier1 or tier2"
"""

from __future__ import annotations

import pytest

from fizzbuzzer.config.loader import CONFIG_ENV_VAR
from fizzbuzzer.core.fizzbuzzer import FizzBuzzer
from fizzbuzzer.dictionaries.plugins.standard import StandardFizzBuzzDictionary


@pytest.fixture(autouse=True)
def _isolate_user_config(monkeypatch):
    """Never pick up a developer's $FIZZBUZZER_CONFIG."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


@pytest.fixture
def english_fizzbuzzer() -> FizzBuzzer:
    return FizzBuzzer(StandardFizzBuzzDictionary("Fizz", "Buzz", "FizzBuzz"))
