"""Application ports: callable Protocol definitions for adapter functions.

Each Protocol class defines a ``__call__`` method whose signature exactly
matches the corresponding adapter function or adapter instance. Existing
module-level functions satisfy these protocols automatically via structural
subtyping (PEP 544).

System Role:
    Sits between domain and adapters. Infrastructure types (``Config``) are
    imported under ``TYPE_CHECKING`` only so that import-linter layer
    contracts remain satisfied at runtime.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Protocol

from ..domain.enums import OutputFormat
from ..domain.models import DecimalSymbols, LocaleHandle, LocaleSpec

if TYPE_CHECKING:
    from lib_layered_config import Config


class LocaleProvider(Protocol):
    """Build a locale handle for an identifier from one locale-data source.

    Raises ``UnsupportedLocaleError`` when the source cannot construct it.
    """

    def __call__(self, spec: LocaleSpec) -> LocaleHandle: ...


class SymbolDatabase(Protocol):
    """Query canonical decimal/group symbols and grouping size of a CLDR locale id."""

    def __call__(self, locale_id: str) -> DecimalSymbols: ...


class TemplateRenderer(Protocol):
    """Render an already rounded number through a locale-aware number template."""

    def __call__(self, number: Decimal, precision: int, handle: LocaleHandle) -> str: ...


class ToolkitFormatter(Protocol):
    """Delegate number-to-string conversion to a GUI toolkit's locale.

    ``precision`` is ``None`` for integers and the fixed-point digit count
    for decimals.
    """

    def __call__(self, value: int | float, locale_spec: str, *, precision: int | None = ...) -> str: ...


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class DisplayConfig(Protocol):
    """Display the provided configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


__all__ = [
    "DisplayConfig",
    "GetConfig",
    "InitLogging",
    "LocaleProvider",
    "SymbolDatabase",
    "TemplateRenderer",
    "ToolkitFormatter",
]
