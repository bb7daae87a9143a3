# fizzbuzzer/cli/__init__.py
"""
FizzBuzzer CLI.

Usage:
    fizzbuzzer run              # Print 1..10000, then "Fin!"
    fizzbuzzer eval 3 5 15      # Label individual values
    fizzbuzzer plugins          # List dictionary plugins
    fizzbuzzer config           # Show merged configuration
    fizzbuzzer version
"""

from fizzbuzzer.cli.cli import app

__all__ = ["app"]
