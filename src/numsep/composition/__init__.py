"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

# Locale-data services
from ..adapters.cldr import build_cldr_locale, query_cldr_symbols, render_template

# Configuration services
from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config
from ..adapters.libc import build_platform_locale, build_posix_locale

# Logging services
from ..adapters.logging.setup import init_logging
from ..adapters.qt import format_with_qlocale, qt_available
from ..application.providers import ProviderConfig

# Static conformance assertions: pyright verifies that each adapter function
# structurally satisfies its corresponding Protocol at type-check time.
if TYPE_CHECKING:
    from ..adapters.memory import ToolkitSpy
    from ..application.ports import (
        DisplayConfig,
        GetConfig,
        InitLogging,
        LocaleProvider,
        SymbolDatabase,
        TemplateRenderer,
        ToolkitFormatter,
    )

    _assert_get_config: GetConfig = get_config
    _assert_display_config: DisplayConfig = display_config
    _assert_init_logging: InitLogging = init_logging
    _assert_cldr: LocaleProvider = build_cldr_locale
    _assert_posix: LocaleProvider = build_posix_locale
    _assert_platform: LocaleProvider = build_platform_locale
    _assert_symbols: SymbolDatabase = query_cldr_symbols
    _assert_render_template: TemplateRenderer = render_template
    _assert_toolkit: ToolkitFormatter = format_with_qlocale


def build_production_providers() -> ProviderConfig:
    """Wire Babel, the C library and (when installed) PySide6 into a ProviderConfig."""
    return ProviderConfig(
        cldr=build_cldr_locale,
        posix=build_posix_locale,
        platform=build_platform_locale,
        symbols=query_cldr_symbols,
        render_template=render_template,
        toolkit=format_with_qlocale if qt_available() else None,
    )


def build_testing_providers(*, toolkit: ToolkitSpy | None = None) -> ProviderConfig:
    """Wire table-backed providers into a ProviderConfig.

    The template path still renders through Babel; only the locale data is
    fixed. Pass a :class:`ToolkitSpy` to make ``qt-native`` reachable.
    """
    from ..adapters.memory import (
        CLDR_TABLE,
        PLATFORM_TABLE,
        POSIX_TABLE,
        InMemoryLocaleProvider,
        InMemorySymbolDatabase,
    )
    from ..domain.enums import ProviderKind

    return ProviderConfig(
        cldr=InMemoryLocaleProvider(ProviderKind.CLDR, CLDR_TABLE),
        posix=InMemoryLocaleProvider(ProviderKind.POSIX, POSIX_TABLE),
        platform=InMemoryLocaleProvider(ProviderKind.PLATFORM, PLATFORM_TABLE),
        symbols=InMemorySymbolDatabase(),
        render_template=render_template,
        toolkit=toolkit,
    )


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    display_config: DisplayConfig
    init_logging: InitLogging
    providers: ProviderConfig


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        display_config=display_config,
        init_logging=init_logging,
        providers=build_production_providers(),
    )


def build_testing(*, providers: ProviderConfig | None = None) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Args:
        providers: Optional provider configuration. When None, the
            table-backed providers from :func:`build_testing_providers`
            are used.

    Returns:
        AppServices container with in-memory adapters.
    """
    from ..adapters.memory import (
        display_config_in_memory,
        get_config_in_memory,
        init_logging_in_memory,
    )

    return AppServices(
        get_config=get_config_in_memory,
        display_config=display_config_in_memory,
        init_logging=init_logging_in_memory,
        providers=providers if providers is not None else build_testing_providers(),
    )


__all__ = [
    # Configuration
    "get_config",
    "display_config",
    # Logging
    "init_logging",
    # Composition
    "AppServices",
    "build_production",
    "build_production_providers",
    "build_testing",
    "build_testing_providers",
]
