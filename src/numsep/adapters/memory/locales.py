"""In-memory locale providers, symbol database and toolkit spy for testing.

Tables hold fixed punctuation per CLDR identifier so tests do not depend on
which locales the host's C library or Babel version ships.

Contents:
    * :class:`InMemoryLocaleProvider` - LocaleProvider over a lookup table.
    * :class:`InMemorySymbolDatabase` - SymbolDatabase over a lookup table.
    * :class:`ToolkitSpy` - Records toolkit calls and renders with the stream rules.
    * ``CLDR_TABLE``, ``POSIX_TABLE``, ``PLATFORM_TABLE``, ``SYMBOL_TABLE``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from ...domain.behaviors import insert_number, round_fixed, split_fixed, to_decimal
from ...domain.enums import ProviderKind
from ...domain.errors import UnsupportedLocaleError
from ...domain.models import DecimalSymbols, LocaleHandle, LocaleSpec, NumericPunctuation

NBSP = "\u00a0"
NNBSP = "\u202f"

CLDR_TABLE: Mapping[str, NumericPunctuation] = MappingProxyType(
    {
        "en_US": NumericPunctuation(".", ",", (3,)),
        "en_US_POSIX": NumericPunctuation(".", ",", ()),
        "de_DE": NumericPunctuation(",", ".", (3,)),
        "de_CH": NumericPunctuation(".", "\u2019", (3,)),
        "fr_FR": NumericPunctuation(",", NNBSP, (3,)),
        "pl_PL": NumericPunctuation(",", NBSP, (3,)),
        "ru_RU": NumericPunctuation(",", NBSP, (3,)),
        "hi_IN": NumericPunctuation(".", ",", (3, 2)),
    }
)

POSIX_TABLE: Mapping[str, NumericPunctuation] = MappingProxyType(
    {
        "en_US": NumericPunctuation(".", ",", (3, 3)),
        "en_US_POSIX": NumericPunctuation(".", "", ()),
        "de_DE": NumericPunctuation(",", ".", (3, 3)),
        "pl_PL": NumericPunctuation(",", NNBSP, (3, 3)),
        "ru_RU": NumericPunctuation(",", NNBSP, (3, 3)),
    }
)

PLATFORM_TABLE: Mapping[str, NumericPunctuation] = MappingProxyType(
    {locale_id: NumericPunctuation(punct.decimal_point, punct.thousands_sep, ()) for locale_id, punct in POSIX_TABLE.items()}
)

SYMBOL_TABLE: Mapping[str, DecimalSymbols] = MappingProxyType(
    {
        locale_id: DecimalSymbols(punct.decimal_point, punct.thousands_sep, punct.grouping[0] if punct.grouping else 0)
        for locale_id, punct in CLDR_TABLE.items()
    }
)


@dataclass(frozen=True)
class InMemoryLocaleProvider:
    """LocaleProvider serving handles from *table*, keyed by CLDR identifier.

    Example:
        >>> provider = InMemoryLocaleProvider(ProviderKind.CLDR, CLDR_TABLE)
        >>> provider(LocaleSpec.parse("de_DE.UTF-8")).punctuation.decimal_point
        ','
    """

    provider: ProviderKind
    table: Mapping[str, NumericPunctuation]

    def __call__(self, spec: LocaleSpec) -> LocaleHandle:
        try:
            punctuation = self.table[spec.cldr_id]
        except KeyError:
            raise UnsupportedLocaleError(f"No {self.provider.value} data for locale {spec.raw!r}") from None
        return LocaleHandle(
            spec=spec,
            provider=self.provider,
            language=spec.language,
            territory=spec.territory,
            encoding=spec.encoding,
            punctuation=punctuation,
        )


@dataclass(frozen=True)
class InMemorySymbolDatabase:
    """SymbolDatabase serving entries from *table*."""

    table: Mapping[str, DecimalSymbols] = field(default_factory=lambda: SYMBOL_TABLE)

    def __call__(self, locale_id: str) -> DecimalSymbols:
        try:
            return self.table[locale_id]
        except KeyError:
            raise UnsupportedLocaleError(f"No CLDR symbols for locale {locale_id!r}") from None


def _empty_call_list() -> list[dict[str, Any]]:
    return []


@dataclass
class ToolkitSpy:
    """Captures toolkit formatter calls for test assertions.

    Renders with the CLDR table and the stream insertion rules so results
    are predictable without a GUI toolkit installed.

    Example:
        >>> spy = ToolkitSpy()
        >>> spy(1234567.891144, "en_US", precision=2)
        '1,234,567.89'
        >>> spy.calls[0]["precision"]
        2
    """

    table: Mapping[str, NumericPunctuation] = field(default_factory=lambda: CLDR_TABLE)
    calls: list[dict[str, Any]] = field(default_factory=_empty_call_list)

    def __call__(self, value: int | float, locale_spec: str, *, precision: int | None = None) -> str:
        self.calls.append({"value": value, "locale": locale_spec, "precision": precision})
        spec = LocaleSpec.parse(locale_spec)
        punctuation = self.table.get(spec.cldr_id, CLDR_TABLE["en_US_POSIX"])
        digits = precision or 0
        return insert_number(split_fixed(round_fixed(to_decimal(value), digits), digits), punctuation)


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
]
