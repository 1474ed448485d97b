"""Document formats for dualformat."""

from .base import Format, FormatRegistry, Responder
from .json import JSONFormat
from .xml import XMLFormat

__all__ = [
    "Format",
    "FormatRegistry",
    "Responder",
    "XMLFormat",
    "JSONFormat",
]

FormatRegistry.register("xml", XMLFormat, extensions=(".xml",))
FormatRegistry.register("json", JSONFormat, default=True, extensions=(".json",))
