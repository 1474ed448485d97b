"""Identifier registry backing the legacy integer ID compatibility mode.

Older API clients expect small integer identifiers while the datastore uses
large opaque strings. The registry hands out sequential integers on first
sight of a string and remembers both directions for the lifetime of the
registry. Nothing is persisted, so integers are only stable within one
process.
"""

import logging
import threading

logger = logging.getLogger(__name__)

# Integers below this are left to the legacy numeric ID range
ID_FLOOR = 1_000_001


class IdentifierRegistry:
    """Bijective mapping between string identifiers and sequential integers."""

    def __init__(self, start: int = ID_FLOOR):
        """Initialize an empty registry.

        Args:
            start: First integer handed out, must not be below ``ID_FLOOR``
        """
        if start < ID_FLOOR:
            raise ValueError(f"start must be at least {ID_FLOOR}, got {start}")
        self._next = start
        self._to_int: dict[str, int] = {}
        self._to_str: dict[int, str] = {}
        self._lock = threading.Lock()

    def lookup_or_assign(self, identifier: str) -> int:
        """Get the integer for a string identifier, allocating one if new."""
        with self._lock:
            value = self._to_int.get(identifier)
            if value is None:
                value = self._next
                self._next += 1
                self._to_int[identifier] = value
                self._to_str[value] = identifier
                logger.debug("Mapped identifier %r to %d", identifier, value)
            return value

    def reverse_lookup(self, value: int) -> str | None:
        """Get the string identifier previously mapped to an integer."""
        with self._lock:
            return self._to_str.get(value)

    def __len__(self) -> int:
        with self._lock:
            return len(self._to_int)

    def __contains__(self, identifier: object) -> bool:
        with self._lock:
            return identifier in self._to_int


_default_registry: IdentifierRegistry | None = None
_default_lock = threading.Lock()


def get_registry() -> IdentifierRegistry:
    """Get the process-wide registry, creating it on first use."""
    global _default_registry
    with _default_lock:
        if _default_registry is None:
            _default_registry = IdentifierRegistry()
        return _default_registry
