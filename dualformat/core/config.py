"""Loading format options from configuration data."""

from pathlib import Path
from typing import Any

import msgspec
import yaml  # type: ignore[import-untyped]

from .exceptions import ConfigError
from .types import FormatOptions


def options_from_dict(data: dict[str, Any] | None) -> FormatOptions:
    """Build options from a plain dictionary.

    Args:
        data: Option values keyed by field name; ``None`` gives defaults

    Returns:
        Validated FormatOptions
    """
    if data is None:
        return FormatOptions()
    if not isinstance(data, dict):
        raise ConfigError(f"Options must be a mapping, got {type(data).__name__}")

    unknown = set(data) - set(FormatOptions.__dataclass_fields__)
    if unknown:
        raise ConfigError(f"Unknown format options: {', '.join(sorted(unknown))}")

    try:
        return msgspec.convert(data, FormatOptions)
    except msgspec.ValidationError as e:
        raise ConfigError(f"Invalid format options: {e}") from e


def options_from_yaml(yaml_str: str) -> FormatOptions:
    """Build options from a YAML document."""
    try:
        data = yaml.safe_load(yaml_str)
    except yaml.YAMLError as e:
        raise ConfigError(f"Cannot parse YAML options: {e}") from e
    return options_from_dict(data)


def options_from_json(json_str: str | bytes) -> FormatOptions:
    """Build options from a JSON document."""
    try:
        data = msgspec.json.decode(json_str)
    except msgspec.DecodeError as e:
        raise ConfigError(f"Cannot parse JSON options: {e}") from e
    return options_from_dict(data)


def load_options(filepath: str | Path, *, format: str | None = None) -> FormatOptions:
    """Load options from a file.

    Args:
        filepath: Path to the options file
        format: "yaml" or "json" (auto-detected from extension if None)

    Returns:
        Validated FormatOptions
    """
    path = Path(filepath)

    if not path.exists():
        raise ConfigError(f"File not found: {filepath}")

    # Auto-detect format from extension
    if format is None:
        extension = path.suffix.lower()
        format = "json" if extension == ".json" else "yaml"

    text = path.read_text()
    if format == "json":
        return options_from_json(text)
    elif format == "yaml":
        return options_from_yaml(text)
    else:
        raise ConfigError(f"Unknown options format: {format}")
