"""Base writer interface and format registry."""

import logging
from abc import ABC, abstractmethod
from dataclasses import replace
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from ..core.coercion import format_length
from ..core.exceptions import ProtocolViolation, UnknownFormatError
from ..core.identifiers import IdentifierRegistry
from ..core.naming import singular
from ..core.types import ElementValue, ElementValues, FormatOptions

logger = logging.getLogger(__name__)


@runtime_checkable
class Responder(Protocol):
    """Protocol for the response sink a rendered document is sent to."""

    def set_type(self, content_type: str) -> Any:
        """Set the content type of the response."""
        ...

    def send(self, body: str) -> Any:
        """Send the response body."""
        ...


class Format(ABC):
    """Abstract document writer.

    A writer is used once: declare a root (or pass one in the options),
    write elements and lists, then render or send. Element names use
    lower-case hyphenated XML style; each format maps them as it needs.
    Absent values are skipped and reported by a ``False`` return, so
    optional fields can be written without checking them first.
    """

    content_type: str = ""

    singular = staticmethod(singular)

    def __init__(
        self,
        options: FormatOptions | None = None,
        registry: IdentifierRegistry | None = None,
        **kwargs: Any,
    ):
        """Initialize the writer.

        Args:
            options: Format options (defaults if None)
            registry: Identifier registry for formats that remap identifiers
            **kwargs: Individual option overrides, e.g. ``root="motor-info"``
        """
        if options is None:
            options = FormatOptions(**kwargs)
        elif kwargs:
            options = replace(options, **kwargs)
        self.options = options
        self._root: str | None = None
        self._closed = False
        self._rendered: str | None = None
        self._registry = registry

    @property
    def compat(self) -> bool:
        """Whether identifiers are remapped to legacy integers."""
        return False

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def root_name(self) -> str | None:
        return self._root

    def declare_root(self, name: str) -> None:
        """Declare the document root element.

        Raises:
            ProtocolViolation: If the document already has a root
        """
        if self._root is not None:
            raise ProtocolViolation(f"document already has a root ({self._root})")
        self._root = name
        self._start_root(name)

    def write_element(self, name: str, value: ElementValue) -> bool:
        """Write a single named value; returns False if nothing was written."""
        if value is None or not self._writable(name):
            return False
        return self._write_element(name, value)

    def write_element_list(self, list_name: str, values: ElementValues) -> bool:
        """Write a named list of values; returns False if nothing was written."""
        values = _as_list(values)
        if not values or not self._writable(list_name):
            return False
        return self._write_element_list(list_name, values)

    def write_length_list(self, list_name: str, values: ElementValues) -> bool:
        """Write lengths given in meters as millimeter strings."""
        values = _as_list(values)
        if not values:
            return False
        return self.write_element_list(list_name, [format_length(v) for v in values])

    def write_id(self, name: str, value: ElementValue) -> bool:
        """Write an identifier value."""
        return self.write_element(name, value)

    def write_id_list(self, list_name: str, values: ElementValues) -> bool:
        """Write a named list of identifier values."""
        return self.write_element_list(list_name, values)

    def close(self) -> None:
        """Finish the document; only the first call has an effect."""
        if self._closed:
            return
        self._finish()
        self._closed = True

    def render(self) -> str:
        """Close the document if needed and return its text."""
        if self._rendered is None:
            self.close()
            self._rendered = self._render()
        return self._rendered

    def send(self, responder: Responder) -> Any:
        """Send the rendered document to a response sink."""
        responder.set_type(self.content_type)
        return responder.send(self.render())

    def to_id(self, value: Any) -> Any:
        """Map an identifier received from a client back to its stored form."""
        return value

    def __str__(self) -> str:
        return self.render()

    def _writable(self, name: str) -> bool:
        if self._closed:
            logger.warning("Ignoring write of %r to a closed %s", name, type(self).__name__)
            return False
        return True

    def _start_root(self, name: str) -> None:  # noqa: B027
        """Hook for formats that emit something when the root is declared."""

    def _finish(self) -> None:  # noqa: B027
        """Hook for formats that emit something when the document closes."""

    @abstractmethod
    def _write_element(self, name: str, value: Any) -> bool:
        """Write a non-absent value."""
        ...

    @abstractmethod
    def _write_element_list(self, list_name: str, values: list[Any]) -> bool:
        """Write a non-empty list of values."""
        ...

    @abstractmethod
    def _render(self) -> str:
        """Serialize the closed document."""
        ...


def _as_list(values: ElementValues) -> list[Any]:
    if values is None:
        return []
    if isinstance(values, list):
        return values
    return list(values)


class FormatRegistry:
    """Registry for document formats."""

    _formats: dict[str, type[Format]] = {}
    _extensions: dict[str, str] = {}
    _default: str | None = None

    @classmethod
    def register(
        cls,
        name: str,
        format_cls: type[Format],
        default: bool = False,
        extensions: tuple[str, ...] = (),
    ) -> None:
        """Register a format class.

        Args:
            name: Format name, e.g. "xml"
            format_cls: Format subclass implementing the writer
            default: Make this the default format
            extensions: File or URL suffixes selecting this format
        """
        cls._formats[name] = format_cls
        for extension in extensions:
            cls._extensions[extension.lower()] = name
        if default or cls._default is None:
            cls._default = name

    @classmethod
    def get(cls, name: str | None = None) -> type[Format]:
        """Get a format class by name."""
        if name is None:
            name = cls._default
        if name is None:
            raise UnknownFormatError("No default format configured")
        if name not in cls._formats:
            raise UnknownFormatError(f"Unknown format: {name}")
        return cls._formats[name]

    @classmethod
    def create(
        cls, name: str | None = None, options: FormatOptions | None = None, **kwargs: Any
    ) -> Format:
        """Create a writer for the named format."""
        return cls.get(name)(options, **kwargs)

    @classmethod
    def for_path(
        cls, path: str | Path, options: FormatOptions | None = None, **kwargs: Any
    ) -> Format:
        """Create a writer chosen by the suffix of a file name or URL path.

        Unrecognized suffixes fall back to the default format.
        """
        extension = Path(str(path)).suffix.lower()
        name = cls._extensions.get(extension)
        return cls.create(name, options, **kwargs)

    @classmethod
    def list(cls) -> list[str]:
        """List available formats."""
        return list(cls._formats.keys())
