"""Core components of dualformat."""

from .coercion import coerce_value, format_length
from .config import load_options, options_from_dict, options_from_json, options_from_yaml
from .exceptions import (
    ConfigError,
    DualFormatError,
    ProtocolViolation,
    UnknownFormatError,
)
from .identifiers import ID_FLOOR, IdentifierRegistry, get_registry
from .naming import camel_case, name_compare, name_sort_key, singular
from .types import FormatOptions

__all__ = [
    "FormatOptions",
    "IdentifierRegistry",
    "ID_FLOOR",
    "get_registry",
    "camel_case",
    "singular",
    "name_compare",
    "name_sort_key",
    "coerce_value",
    "format_length",
    "load_options",
    "options_from_dict",
    "options_from_json",
    "options_from_yaml",
    "DualFormatError",
    "ProtocolViolation",
    "UnknownFormatError",
    "ConfigError",
]
