# fizzbuzzer/config/schema.py
"""Configuration schema for FizzBuzzer."""

from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


def _standard_labels() -> Dict[str, Any]:
    return {"by_three": "Fizz", "by_five": "Buzz", "by_three_and_five": "FizzBuzz"}


class DictionaryConfig(BaseModel):
    """Which dictionary plugin labels the values, and how to build it."""

    model_config = ConfigDict(extra="forbid")

    plugin_name: str = Field("standard", description="Dictionary plugin name")
    kwargs: Dict[str, Any] = Field(
        default_factory=_standard_labels,
        description="Dictionary plugin init kwargs",
    )


class RunConfig(BaseModel):
    """Settings for the console driver."""

    model_config = ConfigDict(extra="forbid")

    start: int = Field(1, description="First value evaluated")
    stop: int = Field(10000, description="Last value evaluated (inclusive)")
    line_format: str = Field(
        "{value} = {result}",
        description="Output line template; receives {value} and {result}",
    )
    farewell: str = Field("Fin!", description="Line printed after the last value")
    wait_for_input: bool = Field(
        False, description="Wait for one line of input before exiting"
    )

    @field_validator("line_format")
    @classmethod
    def check_line_format(cls, v: str) -> str:
        """Only {value} and {result} may appear in the template."""
        try:
            v.format(value=15, result="FizzBuzz")
        except (KeyError, IndexError, ValueError, AttributeError) as e:
            raise ValueError(
                f"line_format {v!r} is not a valid template: {e!r}. "
                "Use the {value} and {result} placeholders."
            ) from e
        return v

    @model_validator(mode="after")
    def check_range(self) -> "RunConfig":
        if self.stop < self.start:
            raise ValueError(f"stop ({self.stop}) must be >= start ({self.start})")
        return self


class FizzBuzzerConfig(BaseModel):
    """Complete FizzBuzzer configuration."""

    model_config = ConfigDict(extra="forbid")

    dictionary: DictionaryConfig = Field(default_factory=DictionaryConfig)
    run: RunConfig = Field(default_factory=RunConfig)
