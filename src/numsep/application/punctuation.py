"""Narrow-character punctuation built from full locale database symbols.

Output streams in the C++ tradition accept exactly one narrow character per
separator. CLDR symbols such as the non-breaking space (``U+00A0``) or the
right single quotation mark (``U+2019``) need several UTF-8 bytes, so they
are replaced by fixed ASCII fallbacks and the substitution is logged.

Contents:
    * :func:`build_punctuation` - query, narrow and package the punctuation.
    * :data:`DECIMAL_POINT_FALLBACK`, :data:`THOUSANDS_SEP_FALLBACK`.
"""

from __future__ import annotations

import logging

from ..domain.models import NumericPunctuation
from .ports import SymbolDatabase

logger = logging.getLogger(__name__)

#: Substitute for a decimal symbol wider than one byte.
DECIMAL_POINT_FALLBACK = "."
#: Substitute for a grouping symbol wider than one byte.
THOUSANDS_SEP_FALLBACK = " "


def _narrow(symbol: str, fallback: str, label: str, locale_id: str) -> str:
    encoded = symbol.encode("utf-8")
    if len(encoded) <= 1:
        return symbol
    hex_bytes = " ".join(f"{byte:#x}" for byte in encoded)
    logger.warning(
        "Truncating %s '%s' - %s",
        label,
        symbol,
        hex_bytes,
        extra={"locale": locale_id, "symbol_bytes": hex_bytes, "fallback": fallback},
    )
    return fallback


def build_punctuation(locale_id: str, symbols: SymbolDatabase) -> NumericPunctuation:
    """Build single-byte punctuation for *locale_id* from the CLDR database.

    Each symbol whose UTF-8 form exceeds one byte is replaced by its
    fallback and reported with exactly one WARNING record. The grouping
    width is the database's primary grouping size, repeated.

    Args:
        locale_id: CLDR identifier such as ``pl_PL``.
        symbols: Symbol database port.

    Returns:
        Punctuation satisfying :attr:`NumericPunctuation.is_narrow`.

    Example:
        >>> from numsep.domain.models import DecimalSymbols
        >>> build_punctuation("pl_PL", lambda _id: DecimalSymbols(",", "\\u00a0", 3))
        NumericPunctuation(decimal_point=',', thousands_sep=' ', grouping=(3,))
    """
    data = symbols(locale_id)
    decimal_point = _narrow(data.decimal, DECIMAL_POINT_FALLBACK, "decimal separator", locale_id)
    thousands_sep = _narrow(data.group, THOUSANDS_SEP_FALLBACK, "thousands separator", locale_id)
    grouping = (data.grouping_size,) if 0 < data.grouping_size < 256 else ()
    return NumericPunctuation(decimal_point=decimal_point, thousands_sep=thousands_sep, grouping=grouping)


__all__ = [
    "DECIMAL_POINT_FALLBACK",
    "THOUSANDS_SEP_FALLBACK",
    "build_punctuation",
]
