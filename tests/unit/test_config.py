"""Unit tests for loading format options."""

import pytest

from dualformat.core.config import (
    load_options,
    options_from_dict,
    options_from_json,
    options_from_yaml,
)
from dualformat.core.exceptions import ConfigError
from dualformat.core.types import FormatOptions


class TestOptionsFromData:
    """Test building options from parsed data."""

    def test_defaults(self):
        """Test that missing data gives defaults."""
        assert options_from_dict(None) == FormatOptions()
        assert options_from_dict({}) == FormatOptions()

    def test_values(self):
        """Test that given values are applied."""
        options = options_from_dict({"root": "motor-info", "compat": True, "indent": 4})
        assert options.root == "motor-info"
        assert options.compat is True
        assert options.indent == 4
        assert options.pretty is True

    def test_unknown_key(self):
        """Test that unknown options are rejected."""
        with pytest.raises(ConfigError, match="Unknown format options: colour"):
            options_from_dict({"colour": "blue"})

    def test_wrong_type(self):
        """Test that mistyped options are rejected."""
        with pytest.raises(ConfigError, match="Invalid format options"):
            options_from_dict({"indent": "wide"})

    def test_not_a_mapping(self):
        """Test that non-mapping data is rejected."""
        with pytest.raises(ConfigError, match="must be a mapping"):
            options_from_dict(["root"])  # type: ignore[arg-type]

    def test_yaml(self):
        """Test YAML options."""
        options = options_from_yaml("root: search-response\ncompat: true\n")
        assert options == FormatOptions(root="search-response", compat=True)

    def test_yaml_invalid(self):
        """Test unparseable YAML."""
        with pytest.raises(ConfigError, match="Cannot parse YAML"):
            options_from_yaml("root: [unclosed")

    def test_json(self):
        """Test JSON options."""
        options = options_from_json('{"pretty": false}')
        assert options.pretty is False

    def test_json_invalid(self):
        """Test unparseable JSON."""
        with pytest.raises(ConfigError, match="Cannot parse JSON"):
            options_from_json("{pretty")


class TestLoadOptions:
    """Test loading options from files."""

    def test_load_yaml_file(self, tmp_path):
        """Test loading a YAML file."""
        path = tmp_path / "format.yaml"
        path.write_text("root: motor-info\nfallback_root: data\n")
        options = load_options(path)
        assert options.root == "motor-info"
        assert options.fallback_root == "data"

    def test_load_json_file(self, tmp_path):
        """Test loading a JSON file."""
        path = tmp_path / "format.json"
        path.write_text('{"compat": true}')
        assert load_options(str(path)).compat is True

    def test_explicit_format(self, tmp_path):
        """Test overriding format detection."""
        path = tmp_path / "format.conf"
        path.write_text('{"indent": 3}')
        assert load_options(path, format="json").indent == 3

    def test_unknown_format(self, tmp_path):
        """Test an unsupported format name."""
        path = tmp_path / "format.toml"
        path.write_text("")
        with pytest.raises(ConfigError, match="Unknown options format"):
            load_options(path, format="toml")

    def test_missing_file(self, tmp_path):
        """Test loading a file that does not exist."""
        with pytest.raises(ConfigError, match="File not found"):
            load_options(tmp_path / "missing.yaml")
