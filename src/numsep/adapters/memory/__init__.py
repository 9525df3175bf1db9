"""In-memory adapter implementations for testing.

Provides lightweight implementations of all application ports that operate
entirely in memory: no C library locale switching, no Babel data lookups
and no filesystem. Logging starts a quiet lib_log_rich runtime only.

Contents:
    * :mod:`.config` - In-memory configuration adapters
    * :mod:`.locales` - Table-backed locale providers, symbol database, ToolkitSpy
    * :mod:`.logging` - Quiet lib_log_rich setup
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import display_config_in_memory, get_config_in_memory, make_config_in_memory
from .locales import (
    CLDR_TABLE,
    NBSP,
    NNBSP,
    PLATFORM_TABLE,
    POSIX_TABLE,
    SYMBOL_TABLE,
    InMemoryLocaleProvider,
    InMemorySymbolDatabase,
    ToolkitSpy,
)
from .logging import init_logging_in_memory

# Static conformance assertions
if TYPE_CHECKING:
    from numsep.application.ports import (
        DisplayConfig,
        GetConfig,
        InitLogging,
        LocaleProvider,
        SymbolDatabase,
        ToolkitFormatter,
    )
    from numsep.domain.enums import ProviderKind

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_locale_provider: LocaleProvider = InMemoryLocaleProvider(ProviderKind.CLDR, CLDR_TABLE)
    _assert_symbol_database: SymbolDatabase = InMemorySymbolDatabase()
    _assert_toolkit: ToolkitFormatter = ToolkitSpy()

__all__ = [
    "CLDR_TABLE",
    "InMemoryLocaleProvider",
    "InMemorySymbolDatabase",
    "NBSP",
    "NNBSP",
    "PLATFORM_TABLE",
    "POSIX_TABLE",
    "SYMBOL_TABLE",
    "ToolkitSpy",
    "display_config_in_memory",
    "get_config_in_memory",
    "init_logging_in_memory",
    "make_config_in_memory",
]
