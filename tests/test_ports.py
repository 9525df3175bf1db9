"""Port contract tests: in-memory and production adapters satisfy the same behaviour."""

from __future__ import annotations

from decimal import Decimal

import lib_log_rich.runtime
import pytest
from lib_layered_config import Config

from numsep.adapters.cldr import build_cldr_locale, query_cldr_symbols, render_template
from numsep.adapters.memory import (
    CLDR_TABLE,
    InMemoryLocaleProvider,
    InMemorySymbolDatabase,
    ToolkitSpy,
    display_config_in_memory,
    get_config_in_memory,
    init_logging_in_memory,
    make_config_in_memory,
)
from numsep.application.ports import LocaleProvider, SymbolDatabase
from numsep.domain.enums import OutputFormat, ProviderKind
from numsep.domain.errors import UnsupportedLocaleError
from numsep.domain.models import DecimalSymbols, LocaleHandle, LocaleSpec

LOCALE_PROVIDERS: dict[str, LocaleProvider] = {
    "memory": InMemoryLocaleProvider(ProviderKind.CLDR, CLDR_TABLE),
    "babel": build_cldr_locale,
}
SYMBOL_DATABASES: dict[str, SymbolDatabase] = {
    "memory": InMemorySymbolDatabase(),
    "babel": query_cldr_symbols,
}


@pytest.mark.os_agnostic
@pytest.mark.parametrize("name", list(LOCALE_PROVIDERS))
def test_locale_provider_returns_a_handle_for_its_spec(name: str) -> None:
    """A provider keeps the parsed locale and stamps its provider kind."""
    spec = LocaleSpec.parse("de_DE.UTF-8")
    handle = LOCALE_PROVIDERS[name](spec)

    assert isinstance(handle, LocaleHandle)
    assert handle.spec is spec
    assert handle.provider is ProviderKind.CLDR
    assert handle.overridden is False
    assert handle.cldr_id == "de_DE"


@pytest.mark.os_agnostic
@pytest.mark.parametrize("name", list(LOCALE_PROVIDERS))
def test_locale_provider_rejects_unknown_locales(name: str) -> None:
    """Unknown locales raise UnsupportedLocaleError."""
    with pytest.raises(UnsupportedLocaleError):
        LOCALE_PROVIDERS[name](LocaleSpec.parse("xx_XX"))


@pytest.mark.os_agnostic
@pytest.mark.parametrize("name", list(SYMBOL_DATABASES))
def test_symbol_database_agrees_on_german(name: str) -> None:
    """Both databases report the same German symbols."""
    assert SYMBOL_DATABASES[name]("de_DE") == DecimalSymbols(",", ".", 3)


@pytest.mark.os_agnostic
@pytest.mark.parametrize("name", list(SYMBOL_DATABASES))
def test_symbol_database_rejects_unknown_locales(name: str) -> None:
    """Unknown identifiers raise UnsupportedLocaleError."""
    with pytest.raises(UnsupportedLocaleError):
        SYMBOL_DATABASES[name]("xx_XX")


@pytest.mark.os_agnostic
def test_memory_and_babel_render_the_same_template() -> None:
    """Table data matches Babel for the locales both know."""
    for locale_id in ("en_US", "de_DE", "pl_PL", "hi_IN"):
        spec = LocaleSpec.parse(locale_id)
        memory = render_template(Decimal("1234567.89"), 2, LOCALE_PROVIDERS["memory"](spec))
        babel = render_template(Decimal("1234567.89"), 2, build_cldr_locale(spec))
        assert memory == babel


@pytest.mark.os_agnostic
def test_toolkit_spy_records_every_call() -> None:
    """The spy keeps call arguments in order."""
    spy = ToolkitSpy()
    spy(1, "C")
    spy(2.5, "de_DE", precision=1)

    assert spy.calls == [
        {"value": 1, "locale": "C", "precision": None},
        {"value": 2.5, "locale": "de_DE", "precision": 1},
    ]


@pytest.mark.os_agnostic
def test_get_config_in_memory_returns_empty_config() -> None:
    """Nothing configured, so the settings model supplies every default."""
    config = get_config_in_memory(profile="anything")
    assert isinstance(config, Config)
    assert config.as_dict() == {}


@pytest.mark.os_agnostic
def test_make_config_in_memory_copies_the_data() -> None:
    """The source mapping is not shared."""
    data = {"numsep": {"precision": 3}}
    config = make_config_in_memory(data)
    data["numsep"] = {"precision": 9}
    assert config["numsep"]["precision"] == 3


@pytest.mark.os_agnostic
def test_display_in_memory_has_no_output(capsys: pytest.CaptureFixture[str]) -> None:
    """The no-op display stays silent."""
    display_config_in_memory(make_config_in_memory({"numsep": {}}), output_format=OutputFormat.JSON)
    assert capsys.readouterr().out == ""


@pytest.mark.os_agnostic
def test_logging_in_memory_leaves_a_running_runtime() -> None:
    """Commands can bind log scopes after the in-memory setup."""
    init_logging_in_memory(make_config_in_memory({}))
    init_logging_in_memory(make_config_in_memory({}))

    assert lib_log_rich.runtime.is_initialised()
