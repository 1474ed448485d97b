"""dualformat writes API responses as XML or JSON from one sequence of calls.

Typical use::

    fmt = XMLFormat(root="motor-info", compat=True)
    fmt.write_id("motor-id", motor.id)
    fmt.write_element("diameter", motor.diameter)
    fmt.write_element_list("delays", motor.delays)
    body = fmt.render()

Element names use lower-case hyphenated XML style and are converted to
camelCase keys for JSON.
"""

__version__ = "0.1.0"

from .core import (
    ConfigError,
    DualFormatError,
    FormatOptions,
    IdentifierRegistry,
    ProtocolViolation,
    UnknownFormatError,
    get_registry,
    load_options,
    name_compare,
)
from .format import Format, FormatRegistry, JSONFormat, Responder, XMLFormat

__all__ = [
    "__version__",
    "Format",
    "FormatRegistry",
    "Responder",
    "XMLFormat",
    "JSONFormat",
    "FormatOptions",
    "IdentifierRegistry",
    "get_registry",
    "load_options",
    "name_compare",
    "DualFormatError",
    "ProtocolViolation",
    "UnknownFormatError",
    "ConfigError",
]
