"""XML document writer."""

import logging
from collections.abc import Mapping
from typing import Any

from lxml import etree

from ..core.coercion import is_non_finite, xml_text
from ..core.identifiers import IdentifierRegistry, get_registry
from ..core.types import ElementValue, ElementValues, FormatOptions
from .base import Format

logger = logging.getLogger(__name__)


class XMLFormat(Format):
    """Writer producing a single-rooted XML document.

    Mapping values use their first entry as the element text and the
    remaining entries as attributes, in order::

        fmt.write_element("motor", {"name": "F10", "type": "reload"})
        # <motor type="reload">F10</motor>

    Lists are written as a container holding one singular-named child per
    value: ``the-things`` becomes ``<the-things><the-thing>...``.

    With ``compat`` enabled, string identifiers written through
    :meth:`write_id` are replaced by small integers from an
    :class:`IdentifierRegistry` so clients of the older numeric-ID API keep
    working.
    """

    content_type = "text/xml"

    def __init__(
        self,
        options: FormatOptions | None = None,
        registry: IdentifierRegistry | None = None,
        **kwargs: Any,
    ):
        """Initialize the writer.

        Args:
            options: Format options (defaults if None)
            registry: Identifier registry for compat mode (process-wide if None)
            **kwargs: Individual option overrides
        """
        super().__init__(options, registry, **kwargs)
        self._element: etree._Element | None = None
        self._pending: list[etree._Element] = []
        if self.options.root:
            self.declare_root(self.options.root)

    @property
    def compat(self) -> bool:
        return self.options.compat

    @property
    def registry(self) -> IdentifierRegistry:
        """Registry used for identifier remapping."""
        if self._registry is None:
            self._registry = get_registry()
        return self._registry

    def write_id(self, name: str, value: ElementValue) -> bool:
        """Write an identifier, remapping strings to integers in compat mode."""
        if value is None or not self._writable(name):
            return False
        return self.write_element(name, self._map_id(value))

    def write_id_list(self, list_name: str, values: ElementValues) -> bool:
        """Write a list of identifiers, remapping each in compat mode."""
        if values is None or not self._writable(list_name):
            return False
        return self.write_element_list(list_name, [self._map_id(v) for v in values])

    def to_id(self, value: Any) -> Any:
        """Map a legacy integer identifier back to its string form.

        Only applies in compat mode. Integers the registry has never handed
        out are returned unchanged.
        """
        if not self.compat or isinstance(value, bool):
            return value
        if isinstance(value, int):
            key = value
        elif isinstance(value, str) and value.isascii() and value.isdecimal():
            key = int(value)
        else:
            return value
        original = self.registry.reverse_lookup(key)
        return value if original is None else original

    def _map_id(self, value: Any) -> Any:
        if self.compat and isinstance(value, str):
            return self.registry.lookup_or_assign(value)
        return value

    def _start_root(self, name: str) -> None:
        self._element = etree.Element(name)
        for child in self._pending:
            self._element.append(child)
        self._pending.clear()

    def _append(self, child: etree._Element) -> None:
        if self._element is None:
            self._pending.append(child)
        else:
            self._element.append(child)

    def _write_element(self, name: str, value: Any) -> bool:
        child = self._make_element(name, value)
        if child is None:
            return False
        self._append(child)
        return True

    def _write_element_list(self, list_name: str, values: list[Any]) -> bool:
        container = etree.Element(list_name)
        child_name = self.singular(list_name)
        for value in values:
            if value is None:
                continue
            child = self._make_element(child_name, value)
            if child is not None:
                container.append(child)
        self._append(container)
        return True

    def _make_element(self, name: str, value: Any) -> etree._Element | None:
        """Build an element for a value, or None if the value is not writable."""
        if isinstance(value, Mapping):
            if not value:
                return etree.Element(name)
            items = iter(value.items())
            _, text = next(items)
            element = etree.Element(name)
            for key, attr in items:
                if attr is None or is_non_finite(attr):
                    continue
                element.set(key, xml_text(attr))
        else:
            text = value
            element = etree.Element(name)

        if is_non_finite(text):
            logger.debug("Dropping non-finite value for element %r", name)
            return None
        if text is not None:
            element.text = xml_text(text)
        return element

    def _finish(self) -> None:
        if self._element is None:
            logger.debug(
                "Closing XML document without a root, using %r",
                self.options.fallback_root,
            )
            self.declare_root(self.options.fallback_root)

    def _render(self) -> str:
        document = etree.tostring(
            self._element,
            xml_declaration=True,
            encoding="UTF-8",
            pretty_print=self.options.pretty,
        )
        return document.decode("utf-8")
