"""Default configuration for status line values."""

from ..types import Suffix, Unit
from .schema import FormatsConfig, VariableConfigModel


def get_default_config() -> FormatsConfig:
    """Generate the default set of named formats."""
    return FormatsConfig(
        version=1,
        formats={
            "cpu": VariableConfigModel(min_width=3),
            "memory": VariableConfigModel(min_width=3, min_suffix=Suffix.ONE),
            "net": VariableConfigModel(
                min_width=3, unit=Unit.BITS_PER_SECOND, min_suffix=Suffix.KILO
            ),
            "battery-bar": VariableConfigModel(min_width=5, bar_max_value=100.0),
            "title": VariableConfigModel(max_width=20),
        },
    )
