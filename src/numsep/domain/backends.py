"""Single routing table from backend kind to provider, render path and override."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .enums import BackendKind, ProviderKind, RenderPath


@dataclass(frozen=True, slots=True)
class BackendRoute:
    """How one backend kind is served.

    Attributes:
        provider: Locale-data provider, or ``None`` for toolkit kinds.
        path: Rendering path used once the locale is resolved.
        override: Whether narrow-character punctuation replaces the provider's.
    """

    provider: ProviderKind | None
    path: RenderPath
    override: bool = False


BACKEND_TABLE: Mapping[BackendKind, BackendRoute] = MappingProxyType(
    {
        BackendKind.TEMPLATE_CLDR: BackendRoute(ProviderKind.CLDR, RenderPath.TEMPLATE),
        BackendKind.TEMPLATE_CLDR_OVERRIDE: BackendRoute(ProviderKind.CLDR, RenderPath.TEMPLATE, override=True),
        BackendKind.TEMPLATE_POSIX: BackendRoute(ProviderKind.POSIX, RenderPath.TEMPLATE),
        BackendKind.TEMPLATE_PLATFORM: BackendRoute(ProviderKind.PLATFORM, RenderPath.TEMPLATE),
        BackendKind.QT_NATIVE: BackendRoute(None, RenderPath.TOOLKIT),
        BackendKind.STREAM_CLDR: BackendRoute(ProviderKind.CLDR, RenderPath.STREAM),
        BackendKind.STREAM_POSIX: BackendRoute(ProviderKind.POSIX, RenderPath.STREAM),
        BackendKind.STREAM_PLATFORM: BackendRoute(ProviderKind.PLATFORM, RenderPath.STREAM),
    }
)


def route_for(kind: BackendKind) -> BackendRoute:
    """Return the route serving *kind*.

    Example:
        >>> route_for(BackendKind.STREAM_POSIX).provider
        <ProviderKind.POSIX: 'posix'>
        >>> route_for(BackendKind.TEMPLATE_CLDR_OVERRIDE).override
        True
    """
    return BACKEND_TABLE[BackendKind(kind)]


def requires_toolkit(kind: BackendKind) -> bool:
    """True when *kind* bypasses the locale providers for the GUI toolkit.

    Example:
        >>> requires_toolkit(BackendKind.QT_NATIVE)
        True
        >>> requires_toolkit(BackendKind.STREAM_CLDR)
        False
    """
    return route_for(kind).path is RenderPath.TOOLKIT


__all__ = [
    "BACKEND_TABLE",
    "BackendRoute",
    "requires_toolkit",
    "route_for",
]
