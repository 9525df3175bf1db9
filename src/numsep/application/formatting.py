"""Format integers and fixed-precision decimals for a locale and backend kind.

Both rendering paths receive the same rounded ``Decimal``, so for a given
handle they can differ in separator placement or character but never in
digits or rounding.

Contents:
    * :func:`format_integer` - render an ``int``.
    * :func:`format_decimal` - render a number with ``precision`` fraction digits.
"""

from __future__ import annotations

from decimal import Decimal

from ..domain.backends import route_for
from ..domain.behaviors import Number, insert_number, round_fixed, split_fixed, to_decimal, validate_precision
from ..domain.enums import BackendKind, RenderPath
from ..domain.models import LocaleSpec
from .providers import ProviderConfig
from .selection import resolve_locale


def _render(
    number: Decimal,
    precision: int,
    locale_spec: str | LocaleSpec,
    kind: BackendKind,
    providers: ProviderConfig,
    *,
    is_integer: bool,
) -> str:
    kind = BackendKind(kind)
    route = route_for(kind)
    if route.path is RenderPath.TOOLKIT:
        toolkit = providers.require_toolkit(kind)
        if is_integer:
            return toolkit(int(number), str(locale_spec), precision=None)
        return toolkit(float(number), str(locale_spec), precision=precision)

    handle = resolve_locale(kind, locale_spec, providers=providers)
    rounded = round_fixed(number, precision)
    if route.path is RenderPath.STREAM:
        return insert_number(split_fixed(rounded, precision), handle.punctuation)
    return providers.render_template(rounded, precision, handle)


def format_integer(value: int, locale_spec: str | LocaleSpec, kind: BackendKind, *, providers: ProviderConfig) -> str:
    """Format *value* with the grouping of *locale_spec* under *kind*.

    Args:
        value: Integer to format.
        locale_spec: Locale identifier, e.g. ``en_US.UTF-8``.
        kind: Backend kind selecting provider and rendering path.
        providers: Provider configuration for this call.

    Raises:
        TypeError: If *value* is not an ``int``.
        UnsupportedLocaleError: If the locale cannot be constructed.
        ConfigurationError: If *kind* cannot run in this installation.

    Example:
        >>> from numsep.composition import build_testing_providers
        >>> format_integer(1234567890, "en_US", BackendKind.STREAM_CLDR, providers=build_testing_providers())
        '1,234,567,890'
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"format_integer expects an int, got {type(value).__name__}")
    return _render(Decimal(value), 0, locale_spec, kind, providers, is_integer=True)


def format_decimal(
    value: Number,
    precision: int,
    locale_spec: str | LocaleSpec,
    kind: BackendKind,
    *,
    providers: ProviderConfig,
) -> str:
    """Format *value* fixed-point with *precision* fraction digits.

    Rounds half away from zero. Precision is validated before any locale is
    built.

    Raises:
        InvalidPrecisionError: If *precision* is negative or not an integer.
        ValueError: If *value* is NaN or infinite.
        UnsupportedLocaleError: If the locale cannot be constructed.
        ConfigurationError: If *kind* cannot run in this installation.

    Example:
        >>> from numsep.composition import build_testing_providers
        >>> format_decimal(1234567.891144, 2, "de_DE", BackendKind.STREAM_CLDR, providers=build_testing_providers())
        '1.234.567,89'
    """
    validate_precision(precision)
    return _render(to_decimal(value), precision, locale_spec, kind, providers, is_integer=False)


__all__ = ["format_decimal", "format_integer"]
