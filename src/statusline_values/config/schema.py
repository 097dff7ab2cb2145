"""Configuration schema using Pydantic for validation."""

from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from ..types import Suffix, Unit, Variable


class VariableConfigModel(BaseModel):
    """Configuration for a single named render request."""

    min_width: Optional[int] = Field(default=None, ge=0)
    max_width: Optional[int] = Field(default=None, ge=0)
    pad_with: Optional[str] = Field(default=None, min_length=1, max_length=1)
    unit: Optional[Unit] = None
    min_suffix: Optional[Suffix] = None
    bar_max_value: Optional[float] = None

    model_config = {"extra": "forbid"}

    @field_validator("unit", mode="before")
    @classmethod
    def _parse_unit(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.lower()
        return value

    @field_validator("min_suffix", mode="before")
    @classmethod
    def _parse_suffix(cls, value: Any) -> Any:
        """Accept suffix names ("kilo") as well as exponent levels (1)."""
        if isinstance(value, str) and value.upper() in Suffix.__members__:
            return Suffix[value.upper()]
        return value

    def to_variable(self) -> Variable:
        """Build the render request described by this config."""
        return Variable(
            min_width=self.min_width,
            max_width=self.max_width,
            pad_with=self.pad_with,
            unit=self.unit,
            min_suffix=self.min_suffix,
            bar_max_value=self.bar_max_value,
        )


class FormatsConfig(BaseModel):
    """Named render requests available to the host."""

    version: int = 1
    formats: dict[str, VariableConfigModel] = Field(default_factory=dict)

    model_config = {"extra": "forbid"}
