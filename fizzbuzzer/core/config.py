# fizzbuzzer/core/config.py
"""
Centralized YAML loading for FizzBuzzer.

Usage:
    from fizzbuzzer.core.config import load_yaml, load_config, ConfigError

    # Load raw YAML
    data = load_yaml("fizzbuzzer.yaml")

    # Validate a mapping against a schema
    from fizzbuzzer.config.schema import FizzBuzzerConfig
    config = validate_config(data, FizzBuzzerConfig)
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Type, TypeVar, Union

import yaml
from pydantic import BaseModel, ValidationError

from fizzbuzzer.logging.logger import get_logger
from fizzbuzzer.logging.tags import CONFIG

logger = get_logger(__name__)

T = TypeVar("T", bound=BaseModel)


# =============================================================================
# Errors
# =============================================================================


class ConfigError(Exception):
    """Base error for configuration issues."""

    def __init__(self, message: str, path: Optional[Path] = None):
        self.path = path
        if path:
            message = f"{message} (file: {path})"
        super().__init__(message)


class ConfigNotFoundError(ConfigError):
    """Raised when a config file doesn't exist."""

    pass


class ConfigParseError(ConfigError):
    """Raised when YAML parsing fails."""

    pass


class ConfigValidationError(ConfigError):
    """Raised when config doesn't match schema."""

    pass


# =============================================================================
# Core Loading Functions
# =============================================================================


def load_yaml(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a YAML file and return as dictionary.

    An empty file loads as an empty mapping.

    Raises:
        ConfigNotFoundError: If file doesn't exist
        ConfigParseError: If YAML is invalid or the root is not a mapping
    """
    p = Path(path)

    if not p.exists():
        raise ConfigNotFoundError("Config file not found", path=p)

    if p.is_dir():
        raise ConfigError("Config path is a directory, not a file", path=p)

    try:
        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigParseError(f"Invalid YAML syntax: {e}", path=p) from e

    if not isinstance(data, dict):
        raise ConfigParseError("Config root must be a mapping (dict)", path=p)

    logger.debug(f"{CONFIG} Loaded config from {p}")
    return data


def validate_config(
    data: Dict[str, Any],
    schema: Type[T],
    path: Optional[Path] = None,
) -> T:
    """
    Validate a config mapping against a pydantic schema.

    Raises:
        ConfigValidationError: If data doesn't match the schema
    """
    try:
        return schema.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(
            f"Invalid {schema.__name__}: {e}", path=path
        ) from e


def load_config(path: Union[str, Path], schema: Type[T]) -> T:
    """Load a YAML file and validate it against ``schema``."""
    p = Path(path)
    return validate_config(load_yaml(p), schema, path=p)
