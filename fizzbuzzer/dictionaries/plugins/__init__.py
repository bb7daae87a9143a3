"""
Built-in dictionary plugins for FizzBuzzer.

Each plugin must define:
    - class attribute plugin_name: str
    - the four label methods of FizzBuzzDictionary (indivisible is required
      for discovery)

Automatic discovery happens via:
    fizzbuzzer.core.registry.DICTIONARY_REGISTRY
"""
