"""Formatting utilities for numbers and progress bars."""

import math

from ..types import Suffix

# Blank, then eighths of a block up to a full block
BAR_GLYPHS = (
    " ",
    "▏",
    "▎",
    "▍",
    "▌",
    "▋",
    "▊",
    "▉",
    "█",
)


def _integer_digits(value: float) -> int:
    """Length of the integer part of a number."""
    if value > 0 and math.isfinite(value):
        return max(1, math.floor(math.log10(value)) + 1)
    return 1


def _decimals(min_width: int, digits: int) -> int:
    return max(0, min_width - digits - 1)


def format_number(raw_value: float, min_width: int, min_suffix: Suffix) -> str:
    """Format a number with an SI suffix, filling up to min_width characters.

    Magnitudes are scaled by powers of 1000 regardless of unit, so bytes
    are shown in decimal (K = 1000) steps as well.

    Args:
        raw_value: Non-negative value to format
        min_width: Characters available for the number before the suffix
        min_suffix: Smallest suffix allowed

    Returns:
        Formatted string (e.g., "1.5K", "42M", "3.m")
    """
    min_exp_level = min_suffix.level

    if raw_value > 0 and math.isfinite(raw_value):
        exp_level = int(math.log10(raw_value) // 3)
        exp_level = max(min_exp_level, min(Suffix.TERA.level, exp_level))
        value = raw_value / 1000**exp_level
    elif raw_value == math.inf:
        exp_level = Suffix.TERA.level
        value = raw_value
    else:
        # Zero, negative and NaN are not scaled
        exp_level = min_exp_level
        value = raw_value

    digits = _integer_digits(value)

    # Rounding may carry into a new integer digit (9.96 -> 10.0)
    decimals = _decimals(min_width, digits)
    if math.isfinite(value) and round(value, decimals) >= 10**digits:
        if digits == 3 and exp_level < Suffix.TERA.level and raw_value > 0:
            exp_level += 1
            value /= 1000
            digits = _integer_digits(value)
        else:
            digits += 1

    suffix = Suffix.from_level(exp_level).symbol

    # Characters left for "." and the fractional part
    rest = min_width - digits
    if rest <= 0:
        return f"{value:.0f}{suffix}"
    if rest == 1:
        return f"{value:#.0f}{suffix}"
    return f"{value:.{rest - 1}f}{suffix}"


def format_bar(value: float, length: int) -> str:
    """Render a progress bar with eighth-of-a-character resolution.

    Args:
        value: Filled fraction (clamped to 0-1)
        length: Number of characters in the bar

    Returns:
        Bar string of exactly `length` characters (e.g., "██▌  ")
    """
    if math.isnan(value):
        value = 0.0
    value = max(0.0, min(1.0, value))
    chars_to_fill = value * length

    glyphs = []
    for i in range(length):
        fill = max(0.0, min(1.0, chars_to_fill - i))
        glyphs.append(BAR_GLYPHS[int(fill * 8)])
    return "".join(glyphs)
