"""Pure domain functions with no I/O or framework dependencies.

Covers the separator extractor, fixed-point rounding, the stream-style
number inserter and the locale inspector. Everything here is deterministic
and safe to call from any thread.
"""

from __future__ import annotations

from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal, localcontext

from .errors import InvalidPrecisionError
from .models import CHAR_MAX, FixedPoint, LocaleHandle, LocaleReport, NumericPunctuation

Number = int | float | Decimal
"""Values accepted by the decimal formatter."""


def extract_separator(text: str, start_marker: str, end_marker: str) -> str:
    r"""Return the text between the first *start_marker* and the next *end_marker*.

    When *end_marker* does not follow, everything after *start_marker* is
    returned. A missing *start_marker* or adjacent markers yield ``""``.

    Examples:
        >>> extract_separator("1,234", ",", "\0")
        '234'
        >>> extract_separator("1234", ",", "\0")
        ''
        >>> extract_separator("1,234,567,890", "7", "8")
        ','
        >>> extract_separator("78", "7", "8")
        ''
    """
    start = text.find(start_marker)
    if start < 0:
        return ""
    begin = start + len(start_marker)
    end = text.find(end_marker, begin)
    return text[begin:] if end < 0 else text[begin:end]


def validate_precision(precision: int) -> int:
    """Reject precisions the fixed-point renderers cannot honour.

    Raises:
        InvalidPrecisionError: If *precision* is not a non-negative integer.

    Examples:
        >>> validate_precision(2)
        2
        >>> validate_precision(-1)  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        InvalidPrecisionError: precision must be >= 0, got -1
    """
    if isinstance(precision, bool) or not isinstance(precision, int):
        raise InvalidPrecisionError(f"precision must be an integer, got {precision!r}")
    if precision < 0:
        raise InvalidPrecisionError(f"precision must be >= 0, got {precision}")
    return precision


def to_decimal(value: Number) -> Decimal:
    """Normalise *value* to a finite ``Decimal``.

    Floats go through ``repr`` so the shortest round-tripping digits are
    used instead of the exact binary expansion.

    Raises:
        TypeError: For booleans and non-numeric values.
        ValueError: For NaN and infinities.

    Examples:
        >>> to_decimal(1234567.891144)
        Decimal('1234567.891144')
        >>> to_decimal(10)
        Decimal('10')
    """
    if isinstance(value, bool):
        raise TypeError("Cannot format a boolean as a number")
    if isinstance(value, Decimal):
        number = value
    elif isinstance(value, int):
        number = Decimal(value)
    elif isinstance(value, float):
        number = Decimal(repr(value))
    else:
        raise TypeError(f"Cannot format value of type {type(value).__name__}")
    if not number.is_finite():
        raise ValueError(f"Cannot format non-finite value {value!r}")
    return number


def round_fixed(number: Decimal, precision: int) -> Decimal:
    """Round *number* half away from zero to *precision* fractional digits.

    Examples:
        >>> round_fixed(Decimal("2.675"), 2)
        Decimal('2.68')
        >>> round_fixed(Decimal("-0.5"), 0)
        Decimal('-1')
    """
    quantum = Decimal(1).scaleb(-precision)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, number.adjusted() + precision + 2)
        return number.quantize(quantum, rounding=ROUND_HALF_UP)


def split_fixed(number: Decimal, precision: int) -> FixedPoint:
    """Round *number* and split it into sign, integer and fraction digits.

    Examples:
        >>> split_fixed(Decimal("1234567.891144"), 2)
        FixedPoint(negative=False, integer_digits='1234567', fraction_digits='89')
        >>> split_fixed(Decimal("-42"), 0)
        FixedPoint(negative=True, integer_digits='42', fraction_digits='')
    """
    text = format(round_fixed(number, precision), "f")
    negative = text.startswith("-")
    unsigned = text[1:] if negative else text
    integer_digits, _, fraction_digits = unsigned.partition(".")
    return FixedPoint(negative=negative, integer_digits=integer_digits, fraction_digits=fraction_digits)


def canonical_digits(value: Number, precision: int = 0) -> str:
    """Digits a correct rendering of *value* must contain, separators stripped.

    Example:
        >>> canonical_digits(1234567.891144, 2)
        '123456789'
    """
    return split_fixed(to_decimal(value), validate_precision(precision)).digits


def group_digits(digits: str, grouping: Sequence[int], separator: str) -> str:
    """Insert *separator* between digit groups following numpunct rules.

    Groups are taken from the right. Each entry of *grouping* is used once,
    the last one repeats, and a width ``<= 0`` or ``>= CHAR_MAX`` leaves the
    remaining digits ungrouped.

    Examples:
        >>> group_digits("1234567890", (3,), ",")
        '1,234,567,890'
        >>> group_digits("1234567", (3, 2), ",")
        '12,34,567'
        >>> group_digits("1234567", (3, CHAR_MAX), ".")
        '1234.567'
        >>> group_digits("1234567", (), ",")
        '1234567'
    """
    if not grouping or not separator:
        return digits
    groups: list[str] = []
    remaining = digits
    index = 0
    while True:
        width = grouping[index]
        if width <= 0 or width >= CHAR_MAX or len(remaining) <= width:
            break
        groups.append(remaining[-width:])
        remaining = remaining[:-width]
        if index < len(grouping) - 1:
            index += 1
    groups.append(remaining)
    return separator.join(reversed(groups))


def insert_number(fixed: FixedPoint, punctuation: NumericPunctuation) -> str:
    """Write *fixed* the way a locale-imbued output stream would.

    Examples:
        >>> punct = NumericPunctuation(",", ".", (3,))
        >>> insert_number(FixedPoint(False, "1234567", "89"), punct)
        '1.234.567,89'
        >>> insert_number(FixedPoint(True, "1234", ""), punct)
        '-1.234'
    """
    text = group_digits(fixed.integer_digits, punctuation.grouping, punctuation.thousands_sep)
    if fixed.fraction_digits:
        text = f"{text}{punctuation.decimal_point}{fixed.fraction_digits}"
    return f"-{text}" if fixed.negative else text


def inspect_locale(handle: LocaleHandle) -> LocaleReport:
    """Read back the effective grouping configuration of *handle*.

    The thousands separator is reported absent when the locale declares no
    grouping, whatever character its punctuation happens to hold.

    Example:
        >>> from numsep.domain.enums import ProviderKind
        >>> from numsep.domain.models import LocaleSpec
        >>> handle = LocaleHandle(LocaleSpec.parse("C"), ProviderKind.POSIX, "C", None, None,
        ...                       NumericPunctuation(".", ",", ()))
        >>> inspect_locale(handle).thousands_sep is None
        True
    """
    punctuation = handle.punctuation
    return LocaleReport(
        grouping=punctuation.grouping,
        thousands_sep=punctuation.thousands_sep if punctuation.grouping else None,
        decimal_point=punctuation.decimal_point,
    )


__all__ = [
    "Number",
    "canonical_digits",
    "extract_separator",
    "group_digits",
    "insert_number",
    "inspect_locale",
    "round_fixed",
    "split_fixed",
    "to_decimal",
    "validate_precision",
]
