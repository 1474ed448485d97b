"""JSON document writer."""

import logging
from typing import Any

import msgspec

from ..core.coercion import coerce_value
from ..core.identifiers import IdentifierRegistry
from ..core.naming import camel_case
from ..core.types import FormatOptions
from .base import Format

logger = logging.getLogger(__name__)


def _encode_fallback(obj: Any) -> str:
    logger.debug("Encoding unsupported %s as string", type(obj).__name__)
    return str(obj)


class JSONFormat(Format):
    """Writer producing a JSON object.

    Element names are converted to camelCase keys and values are coerced to
    JSON-native types (see :func:`dualformat.core.coercion.coerce_value`).
    There is no root element; a declared root is recorded but not written.
    Identifiers are never remapped.
    """

    content_type = "application/json"

    def __init__(
        self,
        options: FormatOptions | None = None,
        registry: IdentifierRegistry | None = None,
        **kwargs: Any,
    ):
        # registry is unused, JSON never remaps identifiers
        super().__init__(options, registry, **kwargs)
        self._obj: dict[str, Any] = {}
        self._encoder = msgspec.json.Encoder(enc_hook=_encode_fallback)
        if self.options.root:
            self.declare_root(self.options.root)

    @property
    def data(self) -> dict[str, Any]:
        """The accumulated object."""
        return self._obj

    def _write_element(self, name: str, value: Any) -> bool:
        self._obj[camel_case(name)] = coerce_value(value)
        return True

    def _write_element_list(self, list_name: str, values: list[Any]) -> bool:
        self._obj[camel_case(list_name)] = [coerce_value(v) for v in values]
        return True

    def _render(self) -> str:
        encoded = self._encoder.encode(self._obj)
        if self.options.pretty and self.options.indent > 0:
            encoded = msgspec.json.format(encoded, indent=self.options.indent)
        return encoded.decode("utf-8")
