"""Cross-backend probe: format sample values for every locale and backend.

For each sample locale the probe formats a sample integer and decimal with
each requested backend, extracts the separators that appear between two
marker characters, and inspects the locale each provider builds. A locale
that one provider cannot construct, or a provider this platform cannot run,
is recorded on its sample instead of aborting the whole run.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from decimal import Decimal

from ..domain.behaviors import extract_separator, inspect_locale
from ..domain.enums import BackendKind, ProviderKind
from ..domain.errors import ConfigurationError, UnsupportedLocaleError
from ..domain.models import LocaleReport
from .formatting import format_decimal, format_integer
from .providers import ProviderConfig
from .selection import build_locale

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ProbePlan:
    """What to probe and how to find the separators in the output.

    With the default markers, ``7`` and ``8`` straddle the grouping
    separator of ``1234567890`` and the decimal point of ``1234567.89``.
    """

    locales: tuple[str, ...]
    backends: tuple[BackendKind, ...]
    integer_value: int = 1234567890
    decimal_value: Decimal = Decimal("1234567.891144")
    precision: int = 2
    start_marker: str = "7"
    end_marker: str = "8"
    inspect_providers: tuple[ProviderKind, ...] = tuple(ProviderKind)


@dataclass(frozen=True, slots=True)
class BackendSample:
    """Output of one backend for one locale."""

    backend: BackendKind
    decimal_text: str = ""
    integer_text: str = ""
    thousands_sep: str = ""
    decimal_point: str = ""
    error: str | None = None


@dataclass(frozen=True, slots=True)
class ProviderSample:
    """Inspection of the locale one provider builds."""

    provider: ProviderKind
    report: LocaleReport | None = None
    error: str | None = None


@dataclass(frozen=True, slots=True)
class LocaleProbe:
    """All samples collected for one locale."""

    locale: str
    backends: list[BackendSample] = field(default_factory=list)
    providers: list[ProviderSample] = field(default_factory=list)


def _sample_backend(plan: ProbePlan, locale: str, kind: BackendKind, providers: ProviderConfig) -> BackendSample:
    try:
        decimal_text = format_decimal(plan.decimal_value, plan.precision, locale, kind, providers=providers)
        integer_text = format_integer(plan.integer_value, locale, kind, providers=providers)
    except (UnsupportedLocaleError, ConfigurationError) as exc:
        logger.warning("Backend cannot build locale", extra={"backend": kind.value, "locale": locale, "error": str(exc)})
        return BackendSample(backend=kind, error=str(exc))
    return BackendSample(
        backend=kind,
        decimal_text=decimal_text,
        integer_text=integer_text,
        thousands_sep=extract_separator(integer_text, plan.start_marker, plan.end_marker),
        decimal_point=extract_separator(decimal_text, plan.start_marker, plan.end_marker),
    )


def _sample_provider(locale: str, provider: ProviderKind, providers: ProviderConfig) -> ProviderSample:
    try:
        handle = build_locale(provider, locale, providers=providers)
    except (UnsupportedLocaleError, ConfigurationError) as exc:
        logger.warning("Provider cannot build locale", extra={"provider": provider.value, "locale": locale, "error": str(exc)})
        return ProviderSample(provider=provider, error=str(exc))
    return ProviderSample(provider=provider, report=inspect_locale(handle))


def run_probe(plan: ProbePlan, *, providers: ProviderConfig) -> list[LocaleProbe]:
    """Run *plan* and return one :class:`LocaleProbe` per locale.

    Raises:
        ConfigurationError: Before any formatting, when a requested backend
            cannot run with *providers*.
    """
    providers.require(plan.backends)
    results: list[LocaleProbe] = []
    for locale in plan.locales:
        probe = LocaleProbe(locale=locale)
        for kind in plan.backends:
            probe.backends.append(_sample_backend(plan, locale, kind, providers))
        for provider in plan.inspect_providers:
            probe.providers.append(_sample_provider(locale, provider, providers))
        results.append(probe)
    return results


def default_plan(locales: Sequence[str], providers: ProviderConfig) -> ProbePlan:
    """Plan probing *locales* with every backend *providers* can run."""
    return ProbePlan(locales=tuple(locales), backends=providers.available_backends())


__all__ = [
    "BackendSample",
    "LocaleProbe",
    "ProbePlan",
    "ProviderSample",
    "default_plan",
    "run_probe",
]
