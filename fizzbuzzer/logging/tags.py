# fizzbuzzer/logging/tags.py
"""
Logging subsystem tags.

Prefixed to log messages so output stays consistent and searchable.
Changing a tag here updates it project-wide.
"""

FIZZBUZZ = "[FIZZBUZZ]"
REGISTRY = "[REGISTRY]"
CONFIG = "[CONFIG]"
RUNNER = "[RUNNER]"
CLI = "[CLI]"
