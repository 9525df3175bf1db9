"""Public package surface: formatting use cases, locale types and wiring.

Imports are routed through the architectural layers:
- Domain exports: value objects, backend kinds, errors, inspection
- Application exports: formatter, backend selector, probe
- Composition exports: wired provider configurations and configuration loading
- Metadata: package information

Example:
    >>> from numsep import BackendKind, build_testing_providers, format_integer
    >>> format_integer(1234567890, "de_DE.UTF-8", BackendKind.STREAM_CLDR, providers=build_testing_providers())
    '1.234.567.890'
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Application exports
from .application import (
    ProviderConfig,
    build_punctuation,
    format_decimal,
    format_integer,
    resolve_locale,
    run_probe,
)

# Composition exports (wired adapters)
from .composition import build_production_providers, build_testing_providers, get_config

# Domain exports
from .domain import (
    BackendKind,
    ConfigurationError,
    InvalidPrecisionError,
    LocaleHandle,
    LocaleReport,
    LocaleSpec,
    NumericPunctuation,
    ProviderKind,
    UnsupportedLocaleError,
    extract_separator,
    inspect_locale,
)

__all__ = [
    "BackendKind",
    "ConfigurationError",
    "InvalidPrecisionError",
    "LocaleHandle",
    "LocaleReport",
    "LocaleSpec",
    "NumericPunctuation",
    "ProviderConfig",
    "ProviderKind",
    "UnsupportedLocaleError",
    "build_production_providers",
    "build_punctuation",
    "build_testing_providers",
    "extract_separator",
    "format_decimal",
    "format_integer",
    "get_config",
    "inspect_locale",
    "print_info",
    "resolve_locale",
    "run_probe",
]
