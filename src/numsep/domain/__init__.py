"""Domain layer - pure business logic with no I/O or framework dependencies.

Contains the value objects, routing table and pure functions that every
formatting backend shares.

Contents:
    * :mod:`.behaviors` - Extractor, fixed-point rounding, stream inserter, inspector
    * :mod:`.backends` - BackendKind to provider/render-path routing table
    * :mod:`.enums` - Domain enumerations (BackendKind, ProviderKind, RenderPath, OutputFormat)
    * :mod:`.errors` - Domain exception types
    * :mod:`.models` - LocaleSpec, NumericPunctuation, LocaleHandle, LocaleReport
"""

from __future__ import annotations

from .backends import BACKEND_TABLE, BackendRoute, requires_toolkit, route_for
from .behaviors import (
    canonical_digits,
    extract_separator,
    group_digits,
    insert_number,
    inspect_locale,
    split_fixed,
    to_decimal,
    validate_precision,
)
from .enums import BackendKind, OutputFormat, ProviderKind, RenderPath
from .errors import ConfigurationError, InvalidPrecisionError, UnsupportedLocaleError
from .models import CHAR_MAX, DecimalSymbols, FixedPoint, LocaleHandle, LocaleReport, LocaleSpec, NumericPunctuation

__all__ = [
    # Backends
    "BACKEND_TABLE",
    "BackendRoute",
    "requires_toolkit",
    "route_for",
    # Behaviors
    "canonical_digits",
    "extract_separator",
    "group_digits",
    "insert_number",
    "inspect_locale",
    "split_fixed",
    "to_decimal",
    "validate_precision",
    # Enums
    "BackendKind",
    "OutputFormat",
    "ProviderKind",
    "RenderPath",
    # Errors
    "ConfigurationError",
    "InvalidPrecisionError",
    "UnsupportedLocaleError",
    # Models
    "CHAR_MAX",
    "DecimalSymbols",
    "FixedPoint",
    "LocaleHandle",
    "LocaleReport",
    "LocaleSpec",
    "NumericPunctuation",
]
