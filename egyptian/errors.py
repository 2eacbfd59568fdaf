"""Exceptions raised by the Egyptian fraction package."""


class EgyptianError(Exception):
    """Base class for all package errors."""


class InvalidFraction(EgyptianError, ZeroDivisionError):
    """Raised when a fraction is constructed with a zero denominator."""


class ParseError(EgyptianError, ValueError):
    """Raised when a text token cannot be read as ``<integer>/<integer>``."""


class ConfigError(EgyptianError):
    """Raised when a parfile cannot be read or holds malformed values."""


__all__ = ["EgyptianError", "InvalidFraction", "ParseError", "ConfigError"]
