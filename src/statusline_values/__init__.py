"""Compact formatting of status line measurements."""

from .types import Suffix, Unit, Variable
from .utils.formatting import format_bar, format_number
from .value import Value

__version__ = "0.1.0"

__all__ = [
    "Suffix",
    "Unit",
    "Value",
    "Variable",
    "format_bar",
    "format_number",
]
