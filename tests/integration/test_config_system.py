"""Integration tests for configuration system."""

import os

import pytest
import yaml

from pydantic import ValidationError

from statusline_values.config.defaults import get_default_config
from statusline_values.config.loader import (
    get_variable,
    load_config,
    load_config_file,
    save_config,
)
from statusline_values.config.schema import FormatsConfig, VariableConfigModel
from statusline_values.types import Suffix, Unit, Variable


@pytest.fixture
def sample_config():
    """Create a sample configuration."""
    return FormatsConfig(
        version=1,
        formats={
            "wide": VariableConfigModel(
                min_width=6, pad_with="0", unit=Unit.BYTES, min_suffix=Suffix.KILO
            ),
            "bar": VariableConfigModel(min_width=8, bar_max_value=100.0),
        },
    )


def write_config(temp_config_dir, content: str):
    config_dir = temp_config_dir / "statusline-values"
    config_dir.mkdir(parents=True, exist_ok=True)
    config_file = config_dir / "formats.yaml"
    config_file.write_text(content)
    return config_file


@pytest.mark.unit
class TestVariableConfigModel:
    """Tests for render request validation."""

    def test_converts_to_variable(self):
        model = VariableConfigModel(
            min_width=4, max_width=10, pad_with="_", bar_max_value=50
        )

        assert model.to_variable() == Variable(
            min_width=4, max_width=10, pad_with="_", bar_max_value=50.0
        )

    def test_empty_model_is_empty_variable(self):
        assert VariableConfigModel().to_variable() == Variable()

    def test_parses_names(self):
        model = VariableConfigModel(unit="Bits_Per_Second", min_suffix="mega")

        assert model.unit is Unit.BITS_PER_SECOND
        assert model.min_suffix is Suffix.MEGA

    def test_parses_suffix_level(self):
        assert VariableConfigModel(min_suffix=-1).min_suffix is Suffix.MILLI

    @pytest.mark.parametrize(
        "overrides",
        [
            {"min_width": -1},
            {"max_width": -5},
            {"pad_with": ""},
            {"pad_with": "ab"},
            {"unit": "parsecs"},
            {"min_suffix": "peta"},
            {"colour": "red"},
        ],
    )
    def test_rejects_invalid_values(self, overrides):
        with pytest.raises(ValidationError):
            VariableConfigModel(**overrides)


@pytest.mark.integration
class TestConfigLoading:
    """Tests for configuration loading."""

    def test_creates_default_config_when_missing(self, temp_config_dir):
        config = load_config()

        assert config == get_default_config()
        assert "net" in config.formats

        config_file = temp_config_dir / "statusline-values" / "formats.yaml"
        assert config_file.exists()

    def test_loads_existing_config(self, temp_config_dir, sample_config):
        save_config(sample_config)

        loaded = load_config()

        assert loaded == sample_config

    def test_loads_names_written_by_hand(self, temp_config_dir):
        write_config(
            temp_config_dir,
            "formats:\n"
            "  net:\n"
            "    unit: bits_per_second\n"
            "    min_suffix: kilo\n"
            "  name:\n"
            "    max_width: 12\n"
            "    pad_with: '.'\n",
        )

        assert get_variable("net") == Variable(
            unit=Unit.BITS_PER_SECOND, min_suffix=Suffix.KILO
        )
        assert get_variable("name") == Variable(max_width=12, pad_with=".")

    def test_unknown_format_is_empty_variable(self, temp_config_dir):
        assert get_variable("does-not-exist") == Variable()

    def test_empty_file_has_no_formats(self, temp_config_dir):
        write_config(temp_config_dir, "")

        assert load_config().formats == {}

    def test_handles_invalid_yaml(self, temp_config_dir, capsys):
        write_config(temp_config_dir, "invalid: yaml: content: [[[")

        config = load_config()

        assert config == get_default_config()
        assert "Failed to load config" in capsys.readouterr().err

    def test_handles_invalid_schema(self, temp_config_dir):
        write_config(
            temp_config_dir, yaml.dump({"formats": {"net": {"pad_with": "ab"}}})
        )

        assert load_config() == get_default_config()

    def test_unwritable_config_dir_uses_defaults(
        self, monkeypatch, tmp_path, capsys
    ):
        not_a_dir = tmp_path / "file"
        not_a_dir.write_text("")
        monkeypatch.setenv("XDG_CONFIG_HOME", str(not_a_dir))

        assert load_config() == get_default_config()
        assert "Using default configuration." in capsys.readouterr().err
        assert get_variable("net") == Variable(
            min_width=3, unit=Unit.BITS_PER_SECOND, min_suffix=Suffix.KILO
        )

    def test_load_config_file_raises(self, temp_config_dir):
        config_file = write_config(temp_config_dir, "version: not-a-number\n")

        with pytest.raises(ValidationError):
            load_config_file(config_file)

    def test_picks_up_changed_file(self, temp_config_dir):
        config_file = write_config(temp_config_dir, "formats:\n  a:\n    min_width: 1\n")
        assert get_variable("a") == Variable(min_width=1)

        config_file.write_text("formats:\n  a:\n    min_width: 7\n")
        stat = config_file.stat()
        os.utime(config_file, (stat.st_atime, stat.st_mtime + 10))

        assert get_variable("a") == Variable(min_width=7)


@pytest.mark.integration
class TestConfigSaving:
    """Tests for configuration saving."""

    def test_saves_config_to_yaml(self, temp_config_dir, sample_config):
        save_config(sample_config)

        config_file = temp_config_dir / "statusline-values" / "formats.yaml"
        with open(config_file) as f:
            yaml_data = yaml.safe_load(f)

        assert yaml_data["version"] == 1
        assert yaml_data["formats"]["wide"] == {
            "min_width": 6,
            "pad_with": "0",
            "unit": "bytes",
            "min_suffix": 1,
        }
        assert yaml_data["formats"]["bar"] == {"min_width": 8, "bar_max_value": 100.0}
