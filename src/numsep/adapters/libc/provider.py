"""C library locale providers built on the standard :mod:`locale` module.

``setlocale`` changes process-global state, so every query switches
``LC_NUMERIC`` under one module lock, reads what it needs and restores the
previous setting before releasing the lock.

Contents:
    * :func:`build_posix_locale` - punctuation and grouping from ``localeconv()``
    * :func:`build_platform_locale` - separators from ``nl_langinfo()``, no grouping
"""

from __future__ import annotations

import locale
import logging
import threading
from collections.abc import Iterator, Sequence
from contextlib import contextmanager

from numsep.domain.enums import ProviderKind
from numsep.domain.errors import ConfigurationError, UnsupportedLocaleError
from numsep.domain.models import LocaleHandle, LocaleSpec, NumericPunctuation

logger = logging.getLogger(__name__)

_LC_NUMERIC_LOCK = threading.Lock()


@contextmanager
def numeric_locale(name: str) -> Iterator[None]:
    """Switch ``LC_NUMERIC`` to *name* for the duration of the block.

    Raises:
        UnsupportedLocaleError: If the C library has no such locale.
    """
    with _LC_NUMERIC_LOCK:
        previous = locale.setlocale(locale.LC_NUMERIC)
        try:
            locale.setlocale(locale.LC_NUMERIC, name)
        except locale.Error as exc:
            raise UnsupportedLocaleError(f"C library has no locale {name!r}: {exc}") from exc
        try:
            yield
        finally:
            locale.setlocale(locale.LC_NUMERIC, previous)


def grouping_widths(raw: Sequence[int]) -> tuple[int, ...]:
    """Convert a ``localeconv()`` grouping list to numpunct widths.

    A trailing ``0`` means "repeat the last width" and is dropped; ``CHAR_MAX``
    ends grouping and is kept.

    Example:
        >>> grouping_widths([3, 3, 0])
        (3, 3)
        >>> grouping_widths([3, 2, 0])
        (3, 2)
        >>> grouping_widths([3, 127])
        (3, 127)
        >>> grouping_widths([])
        ()
    """
    widths: list[int] = []
    for width in raw:
        if width == 0:
            break
        widths.append(width)
        if width >= locale.CHAR_MAX:
            break
    return tuple(widths)


def _handle(spec: LocaleSpec, provider: ProviderKind, punctuation: NumericPunctuation) -> LocaleHandle:
    return LocaleHandle(
        spec=spec,
        provider=provider,
        language=spec.language,
        territory=spec.territory,
        encoding=spec.encoding,
        punctuation=punctuation,
    )


def build_posix_locale(spec: LocaleSpec) -> LocaleHandle:
    """Build a handle from the C library's ``localeconv()`` for *spec*.

    Example:
        >>> build_posix_locale(LocaleSpec.parse("C")).punctuation
        NumericPunctuation(decimal_point='.', thousands_sep='', grouping=())
    """
    with numeric_locale(spec.raw):
        conventions = locale.localeconv()
    punctuation = NumericPunctuation(
        decimal_point=str(conventions["decimal_point"]),
        thousands_sep=str(conventions["thousands_sep"]),
        grouping=grouping_widths(conventions["grouping"]),  # type: ignore[arg-type]
    )
    logger.debug("Read localeconv", extra={"locale": spec.raw, "grouping": list(punctuation.grouping)})
    return _handle(spec, ProviderKind.POSIX, punctuation)


def build_platform_locale(spec: LocaleSpec) -> LocaleHandle:
    """Build a handle from ``nl_langinfo`` radix and thousands characters.

    This source carries no grouping widths, so handles it builds never
    group digits.

    Raises:
        ConfigurationError: On platforms without ``nl_langinfo``.
        UnsupportedLocaleError: If the C library has no such locale.
    """
    langinfo = getattr(locale, "nl_langinfo", None)
    if langinfo is None:
        raise ConfigurationError("The platform provider needs locale.nl_langinfo, which this OS does not offer")
    with numeric_locale(spec.raw):
        radix = langinfo(locale.RADIXCHAR)
        thousands = langinfo(locale.THOUSEP)
    return _handle(spec, ProviderKind.PLATFORM, NumericPunctuation(radix, thousands, ()))


__all__ = ["build_platform_locale", "build_posix_locale", "grouping_widths", "numeric_locale"]
