"""CLDR adapters backed by Babel.

Contents:
    * :func:`build_cldr_locale` - full locale database provider
    * :func:`query_cldr_symbols` - symbol database for the punctuation builder
    * :func:`render_template` - template rendering path
"""

from __future__ import annotations

from .provider import build_cldr_locale, grouping_widths, parse_cldr_locale, query_cldr_symbols
from .template import NEUTRAL_LOCALE_ID, number_pattern, render_template

__all__ = [
    "NEUTRAL_LOCALE_ID",
    "build_cldr_locale",
    "grouping_widths",
    "number_pattern",
    "parse_cldr_locale",
    "query_cldr_symbols",
    "render_template",
]
