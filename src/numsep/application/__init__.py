"""Application layer - use cases and port definitions.

Contains use cases that orchestrate domain logic and port protocols that
define the interfaces for adapter implementations.

Contents:
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
    * :mod:`.providers` - ProviderConfig threaded through every call
    * :mod:`.punctuation` - Narrow-character punctuation builder
    * :mod:`.selection` - Backend selector
    * :mod:`.formatting` - Integer and decimal formatter
    * :mod:`.probe` - Cross-backend probe
"""

from __future__ import annotations

from .formatting import format_decimal, format_integer
from .ports import (
    DisplayConfig,
    GetConfig,
    InitLogging,
    LocaleProvider,
    SymbolDatabase,
    TemplateRenderer,
    ToolkitFormatter,
)
from .probe import BackendSample, LocaleProbe, ProbePlan, ProviderSample, default_plan, run_probe
from .providers import ProviderConfig
from .punctuation import DECIMAL_POINT_FALLBACK, THOUSANDS_SEP_FALLBACK, build_punctuation
from .selection import build_locale, resolve_locale

__all__ = [
    # Ports
    "DisplayConfig",
    "GetConfig",
    "InitLogging",
    "LocaleProvider",
    "SymbolDatabase",
    "TemplateRenderer",
    "ToolkitFormatter",
    # Use cases
    "BackendSample",
    "DECIMAL_POINT_FALLBACK",
    "LocaleProbe",
    "ProbePlan",
    "ProviderConfig",
    "ProviderSample",
    "THOUSANDS_SEP_FALLBACK",
    "build_locale",
    "build_punctuation",
    "default_plan",
    "format_decimal",
    "format_integer",
    "resolve_locale",
    "run_probe",
]
