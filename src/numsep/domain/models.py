"""Value objects shared by every layer: locale identifiers, punctuation, handles.

All types are frozen dataclasses. A :class:`LocaleHandle` and its
:class:`NumericPunctuation` are built fresh for each formatting call and
owned exclusively by it.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace

from .enums import ProviderKind
from .errors import UnsupportedLocaleError

#: C ``CHAR_MAX``; a grouping width at or above it stops further grouping.
CHAR_MAX = 127

#: Identifiers that name the portable C locale rather than a language.
POSIX_LOCALE_NAMES = frozenset({"C", "POSIX"})

#: CLDR stand-in for the C locale, following Babel's own convention.
CLDR_POSIX_ID = "en_US_POSIX"

_LOCALE_PATTERN = re.compile(
    r"""
    ^(?P<language>[A-Za-z]{1,8})
    (?:[_-](?P<territory>[A-Za-z0-9]{2,8}))?
    (?:\.(?P<encoding>[A-Za-z0-9_-]+))?
    (?:@(?P<modifier>[A-Za-z0-9_-]+))?$
    """,
    re.VERBOSE,
)


@dataclass(frozen=True, slots=True)
class LocaleSpec:
    """Parsed ``language[_TERRITORY][.ENCODING][@modifier]`` identifier.

    The raw string is preserved because the C library providers must pass it
    to ``setlocale`` verbatim.

    Example:
        >>> spec = LocaleSpec.parse("pl_PL.UTF-8")
        >>> (spec.language, spec.territory, spec.encoding)
        ('pl', 'PL', 'UTF-8')
        >>> spec.cldr_id
        'pl_PL'
        >>> LocaleSpec.parse("C").cldr_id
        'en_US_POSIX'
    """

    raw: str
    language: str
    territory: str | None = None
    encoding: str | None = None
    modifier: str | None = None

    @classmethod
    def parse(cls, raw: str) -> LocaleSpec:
        """Parse *raw* into its components.

        Raises:
            UnsupportedLocaleError: If *raw* is empty or not a locale identifier.
        """
        text = raw.strip()
        match = _LOCALE_PATTERN.match(text)
        if match is None:
            raise UnsupportedLocaleError(f"Invalid locale identifier {raw!r}")
        language = match["language"]
        territory = match["territory"]
        return cls(
            raw=text,
            language=language if language in POSIX_LOCALE_NAMES else language.lower(),
            territory=territory.upper() if territory else None,
            encoding=match["encoding"],
            modifier=match["modifier"],
        )

    @property
    def is_posix(self) -> bool:
        """True for the portable ``C``/``POSIX`` locale."""
        return self.language in POSIX_LOCALE_NAMES

    @property
    def cldr_id(self) -> str:
        """Identifier understood by the CLDR database (``language_TERRITORY``)."""
        if self.is_posix:
            return CLDR_POSIX_ID
        return f"{self.language}_{self.territory}" if self.territory else self.language

    def __str__(self) -> str:
        return self.raw


@dataclass(frozen=True, slots=True)
class NumericPunctuation:
    """Decimal point, grouping separator and grouping widths of a locale.

    ``grouping`` follows ``numpunct::grouping()``: the first entry is the
    width of the rightmost group, the last entry repeats, and a width
    ``<= 0`` or ``>= CHAR_MAX`` ends grouping.

    Example:
        >>> punct = NumericPunctuation(".", ",", (3,))
        >>> punct.grouping_bytes
        b'\\x03'
        >>> punct.is_narrow
        True
        >>> NumericPunctuation(",", "\\u00a0", (3,)).is_narrow
        False
    """

    decimal_point: str
    thousands_sep: str
    grouping: tuple[int, ...] = ()

    @property
    def grouping_bytes(self) -> bytes:
        """Grouping widths as the byte string a ``numpunct`` facet returns."""
        return bytes(width for width in self.grouping)

    @property
    def is_narrow(self) -> bool:
        """True when both separators fit in a single UTF-8 byte."""
        return all(len(symbol.encode("utf-8")) <= 1 for symbol in (self.decimal_point, self.thousands_sep))

    @property
    def groups_digits(self) -> bool:
        """True when rendering inserts grouping separators at all."""
        return bool(self.thousands_sep) and bool(self.grouping) and 0 < self.grouping[0] < CHAR_MAX


@dataclass(frozen=True, slots=True)
class LocaleHandle:
    """A locale resolved by one provider, ready for rendering.

    Attributes:
        spec: The identifier the handle was built from.
        provider: Data source that supplied the punctuation.
        language: Language reported by the provider.
        territory: Territory reported by the provider, if any.
        encoding: Character encoding named by the identifier, if any.
        punctuation: Effective numeric punctuation.
        overridden: True once narrow-character punctuation has been installed.
    """

    spec: LocaleSpec
    provider: ProviderKind
    language: str
    territory: str | None
    encoding: str | None
    punctuation: NumericPunctuation
    overridden: bool = False

    @property
    def cldr_id(self) -> str:
        """CLDR identifier rebuilt from the provider-reported metadata."""
        if self.language in POSIX_LOCALE_NAMES:
            return CLDR_POSIX_ID
        return f"{self.language}_{self.territory}" if self.territory else self.language

    def with_punctuation(self, punctuation: NumericPunctuation) -> LocaleHandle:
        """Return a copy whose punctuation shadows the provider's."""
        return replace(self, punctuation=punctuation, overridden=True)


def _hex_bytes(text: str) -> str:
    return " ".join(f"{byte:#x}" for byte in text.encode("utf-8")) or "0x0"


@dataclass(frozen=True, slots=True)
class LocaleReport:
    """Effective grouping configuration read back from a handle.

    ``thousands_sep`` is ``None`` when the locale declares no grouping.

    Example:
        >>> LocaleReport((3,), ",", ".").describe()
        "G: '0x3', T: ',' - 0x2c, D: '.'"
        >>> LocaleReport((), None, ",").describe()
        "G: '', T: '' - 0x0, D: ','"
    """

    grouping: tuple[int, ...]
    thousands_sep: str | None
    decimal_point: str

    def describe(self) -> str:
        """Render the report as a single diagnostic line."""
        grouping = " ".join(f"{width:#x}" for width in self.grouping)
        separator = self.thousands_sep or ""
        return f"G: '{grouping}', T: '{separator}' - {_hex_bytes(separator)}, D: '{self.decimal_point}'"


@dataclass(frozen=True, slots=True)
class DecimalSymbols:
    """Canonical symbols a full locale database declares for one locale.

    Symbols are kept as the database reports them and may span several
    UTF-8 bytes.
    """

    decimal: str
    group: str
    grouping_size: int


@dataclass(frozen=True, slots=True)
class FixedPoint:
    """A number rounded to a fixed count of fractional digits.

    Example:
        >>> FixedPoint(True, "1234", "57").digits
        '123457'
    """

    negative: bool
    integer_digits: str
    fraction_digits: str = ""

    @property
    def digits(self) -> str:
        """All digits, integer part first, without sign or separators."""
        return self.integer_digits + self.fraction_digits


__all__ = [
    "CHAR_MAX",
    "CLDR_POSIX_ID",
    "DecimalSymbols",
    "FixedPoint",
    "LocaleHandle",
    "LocaleReport",
    "LocaleSpec",
    "NumericPunctuation",
    "POSIX_LOCALE_NAMES",
]
