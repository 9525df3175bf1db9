"""Backend selection: turn a backend kind and locale string into a LocaleHandle."""

from __future__ import annotations

import logging

from ..domain.backends import route_for
from ..domain.enums import BackendKind, ProviderKind
from ..domain.errors import ConfigurationError
from ..domain.models import LocaleHandle, LocaleSpec
from .providers import ProviderConfig
from .punctuation import build_punctuation

logger = logging.getLogger(__name__)


def _as_spec(locale_spec: str | LocaleSpec) -> LocaleSpec:
    return locale_spec if isinstance(locale_spec, LocaleSpec) else LocaleSpec.parse(locale_spec)


def build_locale(provider: ProviderKind, locale_spec: str | LocaleSpec, *, providers: ProviderConfig) -> LocaleHandle:
    """Build a handle for *locale_spec* straight from one provider.

    Raises:
        UnsupportedLocaleError: Propagated from the provider.
    """
    return providers.provider_for(provider)(_as_spec(locale_spec))


def resolve_locale(kind: BackendKind, locale_spec: str | LocaleSpec, *, providers: ProviderConfig) -> LocaleHandle:
    """Resolve the locale a backend kind formats with.

    Looks up the provider in the backend table and builds the handle. For
    override kinds the handle's language and territory are turned back into
    a CLDR identifier, narrow punctuation is built for it and installed over
    the provider's own.

    Args:
        kind: Backend kind to resolve for.
        locale_spec: Locale identifier or parsed spec.
        providers: Provider configuration for this call.

    Returns:
        A fresh handle owned by the caller.

    Raises:
        ConfigurationError: If *kind* renders through the GUI toolkit.
        UnsupportedLocaleError: If the provider cannot build the locale.

    Example:
        >>> from numsep.composition import build_testing_providers
        >>> handle = resolve_locale(BackendKind.TEMPLATE_CLDR_OVERRIDE, "pl_PL.UTF-8",
        ...                         providers=build_testing_providers())
        >>> handle.punctuation.thousands_sep, handle.overridden
        (' ', True)
    """
    kind = BackendKind(kind)
    route = route_for(kind)
    if route.provider is None:
        raise ConfigurationError(f"Backend {kind.value!r} formats through the GUI toolkit and has no locale provider")
    handle = build_locale(route.provider, locale_spec, providers=providers)
    if route.override:
        handle = handle.with_punctuation(build_punctuation(handle.cldr_id, providers.symbols))
    logger.debug(
        "Resolved locale",
        extra={"backend": kind.value, "locale": handle.spec.raw, "provider": handle.provider.value},
    )
    return handle


__all__ = ["build_locale", "resolve_locale"]
