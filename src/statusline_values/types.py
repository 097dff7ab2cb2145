"""Data types for status line values."""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional, Union


class Unit(Enum):
    """Display unit attached to a measurement."""

    NONE = "none"
    DEGREES = "degrees"
    PERCENTS = "percents"
    BITS_PER_SECOND = "bits_per_second"
    BYTES_PER_SECOND = "bytes_per_second"
    SECONDS = "seconds"
    WATTS = "watts"
    HERTZ = "hertz"
    BYTES = "bytes"

    @property
    def symbol(self) -> str:
        return _UNIT_SYMBOLS[self]

    def __str__(self) -> str:
        return self.symbol


_UNIT_SYMBOLS = {
    Unit.NONE: "",
    Unit.DEGREES: "°",
    Unit.PERCENTS: "%",
    Unit.BITS_PER_SECOND: "b/s",
    Unit.BYTES_PER_SECOND: "B/s",
    Unit.SECONDS: "s",
    Unit.WATTS: "W",
    Unit.HERTZ: "Hz",
    Unit.BYTES: "B",
}


class Suffix(IntEnum):
    """SI magnitude step, valued by its power-of-1000 exponent."""

    NANO = -3
    MICRO = -2
    MILLI = -1
    ONE = 0
    KILO = 1
    MEGA = 2
    GIGA = 3
    TERA = 4

    @property
    def level(self) -> int:
        return int(self.value)

    @property
    def symbol(self) -> str:
        return _SUFFIX_SYMBOLS[self]

    @classmethod
    def from_level(cls, level: int) -> "Suffix":
        """Map an exponent level to its suffix.

        Levels below Nano collapse to Nano and levels above Tera to Tera.
        """
        return cls(max(cls.NANO.value, min(cls.TERA.value, level)))

    def __str__(self) -> str:
        return self.symbol


_SUFFIX_SYMBOLS = {
    Suffix.NANO: "n",
    Suffix.MICRO: "u",
    Suffix.MILLI: "m",
    Suffix.ONE: "",
    Suffix.KILO: "K",
    Suffix.MEGA: "M",
    Suffix.GIGA: "G",
    Suffix.TERA: "T",
}


@dataclass(frozen=True)
class Text:
    """Text measurement."""

    text: str


@dataclass(frozen=True)
class Integer:
    """Integer measurement."""

    value: int


@dataclass(frozen=True)
class Float:
    """Floating-point measurement."""

    value: float


InternalValue = Union[Text, Integer, Float]


@dataclass(frozen=True)
class Variable:
    """Per-render overrides for formatting a value.

    Every field is optional; None defers to the value's own setting
    or to the formatter default.
    """

    min_width: Optional[int] = None
    max_width: Optional[int] = None
    pad_with: Optional[str] = None
    unit: Optional[Unit] = None
    min_suffix: Optional[Suffix] = None
    bar_max_value: Optional[float] = None
