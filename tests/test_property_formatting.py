"""Property-based tests for digit grouping, rounding and backend agreement."""

from __future__ import annotations

from decimal import Decimal

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from numsep.application.formatting import format_decimal, format_integer
from numsep.composition import build_testing_providers
from numsep.domain.behaviors import canonical_digits, group_digits, round_fixed, split_fixed
from numsep.domain.enums import BackendKind

PROVIDERS = build_testing_providers()
LOCALE_KINDS = [kind for kind in BackendKind if kind is not BackendKind.QT_NATIVE]
LOCALES = ["en_US.UTF-8", "de_DE.UTF-8", "pl_PL.UTF-8", "ru_RU.UTF-8", "C"]

DIGITS = st.from_regex(r"[1-9][0-9]{0,24}", fullmatch=True)
GROUPING = st.lists(st.integers(min_value=-1, max_value=130), max_size=4).map(tuple)
DECIMALS = st.decimals(min_value=-(10**12), max_value=10**12, places=6, allow_nan=False, allow_infinity=False)
WIDE_DECIMALS = st.builds(
    lambda negative, whole, fraction: Decimal(f"{'-' if negative else ''}{whole}.{fraction:04d}"),
    st.booleans(),
    st.integers(min_value=0, max_value=10**38),
    st.integers(min_value=0, max_value=9999),
)
PATH_PAIRS = [
    (BackendKind.STREAM_CLDR, BackendKind.TEMPLATE_CLDR),
    (BackendKind.STREAM_POSIX, BackendKind.TEMPLATE_POSIX),
]


def _digits(text: str) -> str:
    return "".join(char for char in text if char.isdigit())


@pytest.mark.os_agnostic
@given(digits=DIGITS, grouping=GROUPING)
def test_grouping_only_inserts_separators(digits: str, grouping: tuple[int, ...]) -> None:
    """Removing the separator gives back the input digits."""
    assert group_digits(digits, grouping, "'").replace("'", "") == digits


@pytest.mark.os_agnostic
@given(digits=DIGITS, width=st.integers(min_value=1, max_value=6))
def test_single_width_makes_equal_groups(digits: str, width: int) -> None:
    """With one repeating width only the leading group may be shorter."""
    head, *tail = group_digits(digits, (width,), ",").split(",")

    assert 1 <= len(head) <= width
    assert all(len(group) == width for group in tail)


@pytest.mark.os_agnostic
@given(number=DECIMALS, precision=st.integers(min_value=0, max_value=6))
def test_rounding_stays_within_half_a_unit(number: Decimal, precision: int) -> None:
    """The rounded value is never more than half a unit in the last place away."""
    rounded = round_fixed(number, precision)

    assert abs(rounded - number) <= Decimal(1).scaleb(-precision) / 2
    assert -rounded.as_tuple().exponent == precision


@pytest.mark.os_agnostic
@given(number=DECIMALS, precision=st.integers(min_value=0, max_value=6))
def test_fraction_has_exactly_precision_digits(number: Decimal, precision: int) -> None:
    """split_fixed pads or rounds the fraction to the requested width."""
    assert len(split_fixed(number, precision).fraction_digits) == precision


@pytest.mark.os_agnostic
@given(
    number=DECIMALS,
    precision=st.integers(min_value=0, max_value=4),
    locale_id=st.sampled_from(LOCALES),
    kind=st.sampled_from(LOCALE_KINDS),
)
@settings(max_examples=150)
def test_every_backend_prints_canonical_digits(number: Decimal, precision: int, locale_id: str, kind: BackendKind) -> None:
    """Backends disagree on separators, never on digits."""
    text = format_decimal(number, precision, locale_id, kind, providers=PROVIDERS)

    assert _digits(text) == canonical_digits(number, precision)


@pytest.mark.os_agnostic
@given(
    value=st.integers(min_value=-(10**40), max_value=10**40),
    locale_id=st.sampled_from(LOCALES),
    paths=st.sampled_from(PATH_PAIRS),
)
def test_stream_and_template_agree_on_integers(value: int, locale_id: str, paths: tuple[BackendKind, BackendKind]) -> None:
    """Both rendering paths of one provider carry the same digits and sign."""
    stream_kind, template_kind = paths
    stream = format_integer(value, locale_id, stream_kind, providers=PROVIDERS)
    template = format_integer(value, locale_id, template_kind, providers=PROVIDERS)

    assert _digits(stream) == _digits(template) == str(abs(value))
    assert stream.startswith("-") == template.startswith("-") == (value < 0)


@pytest.mark.os_agnostic
@given(
    number=WIDE_DECIMALS,
    precision=st.integers(min_value=0, max_value=4),
    locale_id=st.sampled_from(LOCALES),
    paths=st.sampled_from(PATH_PAIRS),
)
def test_stream_and_template_agree_on_wide_decimals(
    number: Decimal, precision: int, locale_id: str, paths: tuple[BackendKind, BackendKind]
) -> None:
    """Rounding and digits match across paths, also past 28 significant digits."""
    stream_kind, template_kind = paths
    stream = format_decimal(number, precision, locale_id, stream_kind, providers=PROVIDERS)
    template = format_decimal(number, precision, locale_id, template_kind, providers=PROVIDERS)

    assert _digits(stream) == _digits(template) == canonical_digits(number, precision)
