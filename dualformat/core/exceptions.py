"""Exceptions raised by dualformat."""


class DualFormatError(Exception):
    """Base class for all dualformat errors."""


class ProtocolViolation(DualFormatError):
    """Raised when a writer is driven out of order, e.g. a second root."""


class UnknownFormatError(DualFormatError, ValueError):
    """Raised when a format name is not registered."""


class ConfigError(DualFormatError, ValueError):
    """Raised when format options cannot be loaded or validated."""
