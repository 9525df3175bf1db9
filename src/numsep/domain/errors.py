"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Missing, invalid, or unreachable configuration.

    Raised when a requested backend cannot run in this installation (for
    example the Qt backend without PySide6) or when configuration values are
    malformed. Typically caught at CLI boundaries before any formatting starts.

    Example:
        >>> from numsep.domain.errors import ConfigurationError
        >>> err = ConfigurationError("Backend 'qt-native' requires PySide6")
        >>> str(err)
        "Backend 'qt-native' requires PySide6"
    """


class UnsupportedLocaleError(ValueError):
    """A locale identifier that no provider can construct.

    Raised by locale providers at construction time and propagated unchanged
    to the caller, who decides whether to retry with a default locale.

    Example:
        >>> err = UnsupportedLocaleError("Unknown locale 'xx_YY'")
        >>> isinstance(err, ValueError)
        True
    """


class InvalidPrecisionError(ValueError):
    """Fractional precision outside the supported range.

    Example:
        >>> str(InvalidPrecisionError("precision must be >= 0, got -1"))
        'precision must be >= 0, got -1'
    """


__all__ = [
    "ConfigurationError",
    "InvalidPrecisionError",
    "UnsupportedLocaleError",
]
