# fizzbuzzer/logging/__init__.py
"""Logging utilities for FizzBuzzer."""

from fizzbuzzer.logging.logger import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
