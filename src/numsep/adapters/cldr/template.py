"""Template rendering path: CLDR number patterns applied through Babel.

The number pattern is derived from the handle's grouping widths and the
requested precision. A CLDR handle whose punctuation was not overridden is
rendered with its own locale data; every other handle is rendered under a
neutral locale and its ``,``/``.`` are swapped for the handle's separators.

Babel patterns know a primary and a secondary group size only, so widths
past the second one are not expressed on this path.
"""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal, localcontext

from babel import numbers as babel_numbers

from numsep.domain.enums import ProviderKind
from numsep.domain.models import CHAR_MAX, LocaleHandle

from .provider import parse_cldr_locale

#: Locale whose pattern symbols are exactly ``,`` and ``.``.
NEUTRAL_LOCALE_ID = "en"


def number_pattern(grouping: Sequence[int], precision: int) -> str:
    """Build a CLDR decimal pattern for *grouping* and *precision*.

    Example:
        >>> number_pattern((3,), 2)
        '#,##0.00'
        >>> number_pattern((3, 2), 0)
        '#,##,##0'
        >>> number_pattern((), 1)
        '0.0'
    """
    integer = "0"
    if grouping and 0 < grouping[0] < CHAR_MAX:
        primary = grouping[0]
        secondary = grouping[1] if len(grouping) > 1 and 0 < grouping[1] < CHAR_MAX else primary
        integer = "#," + "#" * (primary - 1) + "0"
        if secondary != primary:
            integer = "#," + "#" * secondary + integer[1:]
    fraction = "." + "0" * precision if precision > 0 else ""
    return integer + fraction


def render_template(number: Decimal, precision: int, handle: LocaleHandle) -> str:
    """Render *number* (already rounded) with *precision* fraction digits.

    Example:
        >>> from numsep.domain.models import LocaleSpec, NumericPunctuation
        >>> handle = LocaleHandle(LocaleSpec.parse("C"), ProviderKind.POSIX, "C", None, None,
        ...                       NumericPunctuation("'", "_", (3,)))
        >>> render_template(Decimal("-1234567.50"), 2, handle)
        "-1_234_567'50"
    """
    punctuation = handle.punctuation
    grouping = punctuation.grouping if punctuation.groups_digits else ()
    pattern = number_pattern(grouping, precision)
    # Babel quantizes under the active decimal context.
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, number.adjusted() + precision + 2)
        if handle.provider is ProviderKind.CLDR and not handle.overridden:
            return babel_numbers.format_decimal(number, format=pattern, locale=parse_cldr_locale(handle.cldr_id))
        neutral = babel_numbers.format_decimal(number, format=pattern, locale=NEUTRAL_LOCALE_ID)
    return neutral.translate(str.maketrans({",": punctuation.thousands_sep, ".": punctuation.decimal_point}))


__all__ = ["NEUTRAL_LOCALE_ID", "number_pattern", "render_template"]
