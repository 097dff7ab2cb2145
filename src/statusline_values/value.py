"""Measurement values and their rendering."""

from dataclasses import dataclass, replace
from typing import Optional, Union

from .types import Float, Integer, InternalValue, Suffix, Text, Unit, Variable
from .utils.debug import debug_log
from .utils.formatting import format_bar, format_number

DEFAULT_MIN_SUFFIX = Suffix.NANO
DEFAULT_PAD = " "


def convert_unit(
    value: Union[int, float], from_unit: Unit, to_unit: Unit
) -> Union[int, float]:
    """Convert between bits and bytes per second.

    Any other pair of units leaves the value unchanged.
    """
    if from_unit == Unit.BYTES_PER_SECOND and to_unit == Unit.BITS_PER_SECOND:
        return value * 8
    if from_unit == Unit.BITS_PER_SECOND and to_unit == Unit.BYTES_PER_SECOND:
        if isinstance(value, int):
            # Truncate toward zero
            return -(-value // 8) if value < 0 else value // 8
        return value / 8
    return value


def _bar_ratio(value: float, bar_max_value: float) -> float:
    if bar_max_value == 0:
        ratio = 1.0 if value > 0 else 0.0
        debug_log(f"Bar maximum is zero, drawing {value} with ratio {ratio}")
        return ratio
    return value / bar_max_value


@dataclass(frozen=True)
class Value:
    """A measurement ready to be formatted for display.

    Build with one of the `from_*` constructors and chain modifiers:

        Value.from_float(1536.0).bytes().icon("RAM ")

    Modifiers return a new Value; a Value is never changed after creation.
    """

    value: InternalValue
    unit: Unit = Unit.NONE
    default_min_width: int = 0
    icon_text: Optional[str] = None

    # Constructors
    @classmethod
    def from_string(cls, text: str) -> "Value":
        return cls(value=Text(text), default_min_width=0)

    @classmethod
    def from_integer(cls, value: int) -> "Value":
        return cls(value=Integer(value), default_min_width=2)

    @classmethod
    def from_float(cls, value: float) -> "Value":
        return cls(value=Float(float(value)), default_min_width=3)

    # Options
    def icon(self, icon: str) -> "Value":
        return replace(self, icon_text=icon)

    def min_width(self, min_width: int) -> "Value":
        return replace(self, default_min_width=min_width)

    def with_unit(self, unit: Unit) -> "Value":
        return replace(self, unit=unit)

    # Units
    def degrees(self) -> "Value":
        return self.with_unit(Unit.DEGREES)

    def percents(self) -> "Value":
        return self.with_unit(Unit.PERCENTS)

    def bits_per_second(self) -> "Value":
        return self.with_unit(Unit.BITS_PER_SECOND)

    def bytes_per_second(self) -> "Value":
        return self.with_unit(Unit.BYTES_PER_SECOND)

    def seconds(self) -> "Value":
        return self.with_unit(Unit.SECONDS)

    def watts(self) -> "Value":
        return self.with_unit(Unit.WATTS)

    def hertz(self) -> "Value":
        return self.with_unit(Unit.HERTZ)

    def bytes(self) -> "Value":
        return self.with_unit(Unit.BYTES)

    def format(self, var: Variable) -> str:
        """Render the value using the overrides in `var`.

        Args:
            var: Render request; unset fields fall back to this value's settings

        Returns:
            Icon, formatted value and unit symbol; or only the bar glyphs
            when `var.bar_max_value` is set for a numeric value
        """
        min_width = (
            var.min_width if var.min_width is not None else self.default_min_width
        )
        pad_with = var.pad_with if var.pad_with is not None else DEFAULT_PAD
        unit = var.unit if var.unit is not None else self.unit
        icon = self.icon_text or ""

        # Draw the bar instead of usual formatting (only for numbers)
        if var.bar_max_value is not None and isinstance(self.value, (Integer, Float)):
            ratio = _bar_ratio(self.value.value, var.bar_max_value)
            return format_bar(ratio, min_width)

        if isinstance(self.value, Text):
            text = self.value.text
            missing = min_width - len(text.encode("utf-8"))
            if missing > 0:
                text += pad_with * missing
            if var.max_width is not None:
                text = text[: var.max_width]
            return f"{icon}{text}"

        if isinstance(self.value, Integer):
            number = str(convert_unit(self.value.value, self.unit, unit))
            if len(number) < min_width:
                number = pad_with * (min_width - len(number)) + number
        else:
            min_suffix = (
                var.min_suffix if var.min_suffix is not None else DEFAULT_MIN_SUFFIX
            )
            number = format_number(
                convert_unit(self.value.value, self.unit, unit), min_width, min_suffix
            )

        return f"{icon}{number}{unit.symbol}"

    def __str__(self) -> str:
        return self.format(Variable())
