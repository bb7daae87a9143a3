"""
FizzBuzzer CLI entry point.

Usage:
    python -m fizzbuzzer.cli run
"""

from fizzbuzzer.cli.cli import app

if __name__ == "__main__":
    app()
