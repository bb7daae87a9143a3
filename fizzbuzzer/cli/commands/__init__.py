"""CLI command implementations, imported lazily by fizzbuzzer.cli.cli."""
