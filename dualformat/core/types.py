"""Option and value type definitions for dualformat."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import date
from typing import Any

Scalar = str | int | float | bool | date
ElementValue = Scalar | Mapping[str, Any] | None
ElementValues = Iterable[Any] | None


@dataclass
class FormatOptions:
    """Construction options shared by all formats.

    Attributes:
        root: Document root element name (XML only)
        compat: Remap string identifiers to integers (XML only)
        pretty: Indent the rendered document
        indent: Spaces per indentation level for JSON output
        fallback_root: Root name used when an XML document closes without one
    """

    root: str | None = None
    compat: bool = False
    pretty: bool = True
    indent: int = 2
    fallback_root: str = "response"
