"""Value conversions applied before values reach a document."""

import math
import re
from collections.abc import Mapping
from datetime import date, datetime, timezone
from typing import Any

_NUMERIC = re.compile(r"[0-9]+(\.[0-9]+)?")

# Characters outside the XML 1.0 Char production, including lone surrogates
_XML_ILLEGAL = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")


def coerce_value(value: Any) -> Any:
    """Convert a value to the closest JSON-native type.

    Applied recursively into lists and mappings. Precedence:

    1. ``None`` stays ``None`` (written as ``null``)
    2. strings of digits, optionally with a fraction, become numbers
    3. the strings ``"true"`` and ``"false"`` become booleans
    4. dates and datetimes become ISO-8601 strings
    5. NaN and infinities become ``None``
    6. lists, tuples and sets become lists, mappings become dicts
    7. anything else passes through

    Numeric-looking strings are always reinterpreted, so ``"007"`` becomes
    ``7``. Callers that need the text must not route it through here.
    """
    if value is None or isinstance(value, bool):
        return value

    if isinstance(value, str):
        match = _NUMERIC.fullmatch(value)
        if match:
            if match.group(1) is None:
                return int(value)
            number = float(value)
            return int(number) if number.is_integer() else number
        if value == "true":
            return True
        if value == "false":
            return False
        return value

    if isinstance(value, datetime | date):
        return iso_format(value)

    if isinstance(value, float) and not math.isfinite(value):
        return None

    if isinstance(value, list | tuple | set | frozenset):
        return [coerce_value(v) for v in value]
    if isinstance(value, Mapping):
        return {k: coerce_value(v) for k, v in value.items()}

    return value


def iso_format(value: date) -> str:
    """Format a date or datetime as ISO-8601.

    Datetimes are converted to UTC with millisecond precision and a ``Z``
    suffix; naive datetimes are taken to be UTC already.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value.isoformat(timespec="milliseconds") + "Z"
    return value.isoformat()


def format_length(meters: float | None) -> str | None:
    """Format a length in meters as millimeters with at most one decimal.

    >>> format_length(0.0183)
    '18.3'
    >>> format_length(0.02)
    '20'
    """
    if meters is None:
        return None
    text = f"{meters * 1000:.1f}"
    if text.endswith(".0"):
        text = text[:-2]
    return text


def is_non_finite(value: Any) -> bool:
    """Check for NaN or infinite floats."""
    return isinstance(value, float) and not math.isfinite(value)


def xml_text(value: Any) -> str:
    """Convert a scalar to XML text content.

    Characters XML 1.0 cannot carry, such as most control characters, are
    removed.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, datetime | date):
        return iso_format(value)
    return _XML_ILLEGAL.sub("", str(value))
