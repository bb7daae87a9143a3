# fizzbuzzer/config/__init__.py
"""
Configuration management for FizzBuzzer.

Usage:
    from fizzbuzzer.config import load_fizzbuzzer_config

    config = load_fizzbuzzer_config()
    config.dictionary.plugin_name  # always exists
"""

from fizzbuzzer.config.loader import load_fizzbuzzer_config
from fizzbuzzer.config.schema import DictionaryConfig, FizzBuzzerConfig, RunConfig

__all__ = ["load_fizzbuzzer_config", "FizzBuzzerConfig", "DictionaryConfig", "RunConfig"]
