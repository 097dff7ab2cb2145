#!/usr/bin/env python3

import argparse
import json
import sys

from typing import Any, Optional, cast

from pydantic import ValidationError

from .config.loader import get_variable
from .config.schema import VariableConfigModel
from .types import Unit, Variable
from .utils.debug import debug_log
from .value import Value

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def parse_input_data() -> Any:
    """Parse JSON input from stdin.

    Returns:
        Decoded payload, or an empty list if stdin is not valid JSON
    """
    try:
        input_data = sys.stdin.read()
        return json.loads(input_data)
    except (json.JSONDecodeError, ValueError):
        return []


def value_from_item(item: dict[str, Any]) -> Optional[Value]:
    """Build a Value from one payload item.

    Args:
        item: Payload object with "value" and optional "unit", "icon", "min_width"

    Returns:
        Value, or None if the item has no usable measurement
    """
    raw = item.get("value")
    if isinstance(raw, bool):
        return None
    if isinstance(raw, str):
        value = Value.from_string(raw)
    elif isinstance(raw, int):
        if not INT64_MIN <= raw <= INT64_MAX:
            debug_log(f"Skipping integer outside the 64-bit range: {raw}")
            return None
        value = Value.from_integer(raw)
    elif isinstance(raw, float):
        value = Value.from_float(raw)
    else:
        return None

    unit_name = item.get("unit")
    if unit_name:
        try:
            value = value.with_unit(Unit(str(unit_name).lower()))
        except ValueError:
            debug_log(f"Ignoring unknown unit {unit_name!r}")

    icon = item.get("icon")
    if icon:
        value = value.icon(str(icon))

    min_width = item.get("min_width")
    if isinstance(min_width, int) and not isinstance(min_width, bool):
        value = value.min_width(min_width)

    return value


def variable_from_item(item: dict[str, Any], default_format: str = "") -> Variable:
    """Resolve the render request for one payload item.

    The "format" key may name a configured format or hold inline overrides.
    """
    fmt = item.get("format", default_format)
    if isinstance(fmt, dict):
        try:
            return VariableConfigModel(**fmt).to_variable()
        except ValidationError as e:
            debug_log(f"Invalid inline format {fmt!r}: {e}")
            return Variable()
    if isinstance(fmt, str) and fmt:
        return get_variable(fmt)
    return Variable()


def render_items(payload: Any, default_format: str = "", separator: str = " ") -> str:
    """Render every value in the payload and join the results.

    Args:
        payload: A single item object or a list of item objects
        default_format: Format name used by items without a "format" key
        separator: String placed between rendered items

    Returns:
        Rendered output string
    """
    items = payload if isinstance(payload, list) else [payload]

    rendered = []
    for item in items:
        if not isinstance(item, dict):
            continue
        value = value_from_item(cast(dict[str, Any], item))
        if value is None:
            debug_log(f"Skipping item without a value: {item!r}")
            continue
        rendered.append(value.format(variable_from_item(item, default_format)))

    return separator.join(rendered)


def create_argument_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser.

    Returns:
        Configured argument parser
    """
    from . import __version__

    parser = argparse.ArgumentParser(
        prog="statusline-values",
        description="Format status line measurements read as JSON from stdin",
        epilog='Example: echo \'{"value": 1536.0, "unit": "bytes"}\' | statusline-values',
    )
    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--format",
        "-f",
        default="",
        help="Configured format name for items without their own format",
    )
    parser.add_argument(
        "--separator",
        "-s",
        default=" ",
        help="Text placed between rendered items (default: a space)",
    )
    return parser


def main() -> None:
    """Main entry point: read values from stdin and print them formatted."""
    parser = create_argument_parser()
    args = parser.parse_args()

    payload = parse_input_data()
    debug_log(f"Payload: {payload!r}")

    output = render_items(payload, args.format, args.separator)
    print(output, end="")


if __name__ == "__main__":
    main()
