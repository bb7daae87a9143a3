# fizzbuzzer/config/loader.py
"""
Layered configuration loading for FizzBuzzer.

Merge strategy:
    1. Package defaults (fizzbuzzer/config/default.yaml) - always loaded
    2. User config (explicit path, else $FIZZBUZZER_CONFIG) - overrides defaults

The merged mapping is validated against FizzBuzzerConfig, so callers never
need fallback logic.

Usage:
    from fizzbuzzer.config.loader import load_fizzbuzzer_config

    config = load_fizzbuzzer_config()
    config.run.stop  # always exists
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional, Union

from fizzbuzzer.config.schema import FizzBuzzerConfig
from fizzbuzzer.core.config import load_yaml, validate_config
from fizzbuzzer.logging.logger import get_logger
from fizzbuzzer.logging.tags import CONFIG

logger = get_logger(__name__)

CONFIG_ENV_VAR = "FIZZBUZZER_CONFIG"

DEFAULTS_PATH = Path(__file__).parent / "default.yaml"


# =============================================================================
# Deep Merge
# =============================================================================


def deep_merge(base: dict, override: dict) -> dict:
    """
    Deep merge two dictionaries.

    Values from `override` take precedence over `base`.
    Nested dicts are merged recursively; lists are replaced entirely.

    Examples:
        >>> base = {"a": 1, "b": {"c": 2, "d": 3}}
        >>> override = {"b": {"c": 10}}
        >>> deep_merge(base, override)
        {'a': 1, 'b': {'c': 10, 'd': 3}}
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


# =============================================================================
# Loading Functions
# =============================================================================


def resolve_user_config_path(
    path: Optional[Union[str, Path]] = None,
) -> Optional[Path]:
    """Explicit path wins, then $FIZZBUZZER_CONFIG, else no user config."""
    if path is not None:
        return Path(path)

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)

    return None


def load_defaults() -> dict[str, Any]:
    """Load the package defaults."""
    return load_yaml(DEFAULTS_PATH)


def load_merged_config(path: Optional[Union[str, Path]] = None) -> dict[str, Any]:
    """
    Load defaults merged with user overrides, unvalidated.

    Raises:
        ConfigNotFoundError: If a user config path is given but missing
        ConfigParseError: If either file is not valid YAML
    """
    defaults = load_defaults()

    user_path = resolve_user_config_path(path)
    if user_path is None:
        logger.debug(f"{CONFIG} Using defaults only")
        return defaults

    merged = deep_merge(defaults, load_yaml(user_path))
    logger.debug(f"{CONFIG} Merged defaults with {user_path}")
    return merged


def load_fizzbuzzer_config(
    path: Optional[Union[str, Path]] = None,
) -> FizzBuzzerConfig:
    """
    Load the complete, validated configuration.

    Raises:
        ConfigValidationError: If the merged config doesn't match the schema
    """
    user_path = resolve_user_config_path(path)
    return validate_config(load_merged_config(path), FizzBuzzerConfig, path=user_path)


def get_config_source(path: Optional[Union[str, Path]] = None) -> str:
    """Human-readable description of where config is loaded from."""
    user_path = resolve_user_config_path(path)

    if user_path is not None:
        return f"{user_path} (overriding defaults)"
    return f"{DEFAULTS_PATH} (package defaults)"


__all__ = [
    "CONFIG_ENV_VAR",
    "deep_merge",
    "get_config_source",
    "load_defaults",
    "load_fizzbuzzer_config",
    "load_merged_config",
    "resolve_user_config_path",
]
