# fizzbuzzer/runtime/__init__.py
"""Console driver: evaluates a range of values and emits one line each."""

from fizzbuzzer.runtime.runner import create_fizzbuzzer, format_line, iter_results, run

__all__ = ["create_fizzbuzzer", "format_line", "iter_results", "run"]
