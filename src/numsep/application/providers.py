"""Explicit provider configuration threaded through every formatting call.

Replaces a process-wide "selected backend" switch: each call receives the
complete set of locale-data sources it may use, so concurrent calls never
observe each other's selection.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import cast

from ..domain.backends import BACKEND_TABLE, requires_toolkit
from ..domain.enums import BackendKind, ProviderKind
from ..domain.errors import ConfigurationError
from .ports import LocaleProvider, SymbolDatabase, TemplateRenderer, ToolkitFormatter


@dataclass(frozen=True, slots=True)
class ProviderConfig:
    """Locale-data providers and renderers available to the formatter.

    Attributes:
        cldr: Full locale database provider.
        posix: C library ``localeconv()`` provider.
        platform: Minimal platform provider (no grouping data).
        symbols: CLDR symbol queries used by the punctuation builder.
        render_template: Template-path renderer.
        toolkit: GUI toolkit formatter, or ``None`` when not installed.
    """

    cldr: LocaleProvider
    posix: LocaleProvider
    platform: LocaleProvider
    symbols: SymbolDatabase
    render_template: TemplateRenderer
    toolkit: ToolkitFormatter | None = None

    def provider_for(self, kind: ProviderKind) -> LocaleProvider:
        """Return the provider registered for *kind*."""
        providers = {
            ProviderKind.CLDR: self.cldr,
            ProviderKind.POSIX: self.posix,
            ProviderKind.PLATFORM: self.platform,
        }
        return providers[ProviderKind(kind)]

    def supports(self, kind: BackendKind) -> bool:
        """True when *kind* can run with this configuration."""
        return self.toolkit is not None or not requires_toolkit(kind)

    def available_backends(self) -> tuple[BackendKind, ...]:
        """Backend kinds that can run, in declaration order."""
        return tuple(kind for kind in BACKEND_TABLE if self.supports(kind))

    def require(self, kinds: Iterable[BackendKind]) -> None:
        """Fail fast when any of *kinds* cannot run.

        Raises:
            ConfigurationError: Naming the first unreachable backend.
        """
        for kind in kinds:
            if not self.supports(kind):
                raise ConfigurationError(
                    f"Backend {BackendKind(kind).value!r} requires the GUI toolkit; install numsep[qt] (PySide6)"
                )

    def require_toolkit(self, kind: BackendKind) -> ToolkitFormatter:
        """Return the toolkit formatter or raise for an unreachable *kind*."""
        self.require((kind,))
        return cast("ToolkitFormatter", self.toolkit)


__all__ = ["ProviderConfig"]
