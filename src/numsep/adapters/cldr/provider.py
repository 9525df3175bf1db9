"""CLDR locale provider and symbol database backed by Babel.

Babel ships the Unicode CLDR data that ICU uses, so this is the "full
database" source: canonical decimal and group symbols (which may need
several UTF-8 bytes) and grouping widths taken from the locale's standard
decimal pattern.
"""

from __future__ import annotations

import logging

from babel import Locale, UnknownLocaleError
from babel import numbers as babel_numbers

from numsep.domain.enums import ProviderKind
from numsep.domain.errors import UnsupportedLocaleError
from numsep.domain.models import CHAR_MAX, DecimalSymbols, LocaleHandle, LocaleSpec, NumericPunctuation

logger = logging.getLogger(__name__)


def parse_cldr_locale(locale_id: str) -> Locale:
    """Parse *locale_id* into a Babel locale.

    Raises:
        UnsupportedLocaleError: If CLDR has no data for the identifier.

    Example:
        >>> parse_cldr_locale("pl_PL").territory
        'PL'
    """
    try:
        return Locale.parse(locale_id)
    except UnknownLocaleError as exc:
        raise UnsupportedLocaleError(f"Unknown CLDR locale {locale_id!r}: {exc}") from exc
    except ValueError as exc:
        raise UnsupportedLocaleError(f"Invalid CLDR locale {locale_id!r}: {exc}") from exc


def grouping_widths(babel_locale: Locale) -> tuple[int, ...]:
    """Return numpunct-style widths from the locale's standard decimal pattern.

    Patterns without a grouping separator report ``(1000, 1000)`` in Babel
    and map to ``()``; equal primary and secondary sizes collapse to one
    repeating width.

    Example:
        >>> grouping_widths(Locale.parse("en_US"))
        (3,)
        >>> grouping_widths(Locale.parse("hi_IN"))
        (3, 2)
    """
    pattern = babel_locale.decimal_formats.get(None)
    if pattern is None:
        return ()
    primary, secondary = pattern.grouping
    if not 0 < primary < CHAR_MAX:
        return ()
    if secondary == primary or not 0 < secondary < CHAR_MAX:
        return (primary,)
    return (primary, secondary)


def build_cldr_locale(spec: LocaleSpec) -> LocaleHandle:
    """Build a handle carrying CLDR's own (possibly multi-byte) punctuation.

    Example:
        >>> handle = build_cldr_locale(LocaleSpec.parse("de_DE.UTF-8"))
        >>> handle.punctuation
        NumericPunctuation(decimal_point=',', thousands_sep='.', grouping=(3,))
    """
    babel_locale = parse_cldr_locale(spec.cldr_id)
    punctuation = NumericPunctuation(
        decimal_point=babel_numbers.get_decimal_symbol(babel_locale),
        thousands_sep=babel_numbers.get_group_symbol(babel_locale),
        grouping=grouping_widths(babel_locale),
    )
    return LocaleHandle(
        spec=spec,
        provider=ProviderKind.CLDR,
        language=spec.language if spec.is_posix else babel_locale.language,
        territory=None if spec.is_posix else babel_locale.territory,
        encoding=spec.encoding,
        punctuation=punctuation,
    )


def query_cldr_symbols(locale_id: str) -> DecimalSymbols:
    """Return the canonical decimal/group symbols and primary grouping size.

    Example:
        >>> query_cldr_symbols("pl_PL")
        DecimalSymbols(decimal=',', group='\\xa0', grouping_size=3)
    """
    babel_locale = parse_cldr_locale(locale_id)
    widths = grouping_widths(babel_locale)
    symbols = DecimalSymbols(
        decimal=babel_numbers.get_decimal_symbol(babel_locale),
        group=babel_numbers.get_group_symbol(babel_locale),
        grouping_size=widths[0] if widths else 0,
    )
    logger.debug("Queried CLDR symbols", extra={"locale": locale_id, "grouping_size": symbols.grouping_size})
    return symbols


__all__ = [
    "build_cldr_locale",
    "grouping_widths",
    "parse_cldr_locale",
    "query_cldr_symbols",
]
