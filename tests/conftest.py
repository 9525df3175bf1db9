"""Shared pytest fixtures for formatting, CLI and module-entry tests.

Centralizes test infrastructure:
- All shared fixtures live here
- Tests import fixtures implicitly via pytest's conftest discovery
- Fixtures use descriptive names that read as plain English
"""

from __future__ import annotations

import contextlib
import locale
import os
import re
import tempfile
from collections.abc import Callable, Iterator
from dataclasses import fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

if TYPE_CHECKING:
    from numsep.adapters.memory import ToolkitSpy
    from numsep.application.providers import ProviderConfig
    from numsep.composition import AppServices

_COVERAGE_BASENAME = ".coverage.numsep"


def _purge_stale_coverage_files(cov_path: Path) -> None:
    """Delete leftover SQLite database and journal files from crashed runs."""
    for suffix in ("", "-journal", "-wal", "-shm"):
        with contextlib.suppress(FileNotFoundError):
            Path(str(cov_path) + suffix).unlink()


def pytest_configure(config: pytest.Config) -> None:
    """Redirect the coverage database to a local temp directory.

    Runs before ``pytest-cov`` creates its ``Coverage()`` object, so the
    ``COVERAGE_FILE`` value is picked up however pytest is invoked.
    """
    if "COVERAGE_FILE" not in os.environ:
        cov_path = Path(tempfile.gettempdir()) / _COVERAGE_BASENAME
        _purge_stale_coverage_files(cov_path)
        os.environ["COVERAGE_FILE"] = str(cov_path)


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip tests whose platform prerequisites are missing."""
    skip_posix = pytest.mark.skip(reason="locale.nl_langinfo is not available on this platform")
    skip_qt = pytest.mark.skip(reason="PySide6 is not installed (numsep[qt])")
    from numsep.adapters.qt import qt_available

    has_qt = qt_available()
    for item in items:
        if "posix_only" in item.keywords and not hasattr(locale, "nl_langinfo"):
            item.add_marker(skip_posix)
        if "needs_qt" in item.keywords and not has_qt:
            item.add_marker(skip_qt)


ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _remove_ansi_codes(text: str) -> str:
    """Return *text* stripped of ANSI escape sequences."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` for clean output and ``result.stderr`` for error
    messages; Click keeps them apart.
    """
    return CliRunner()


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config lru_cache before each test.

    Only clears before, not after, because a test may have monkeypatched
    the loader and lost its ``cache_clear`` method.
    """
    from numsep.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts, without provenance."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def testing_providers() -> ProviderConfig:
    """Table-backed providers with the Babel template renderer and no toolkit."""
    from numsep.composition import build_testing_providers

    return build_testing_providers()


@pytest.fixture
def toolkit_spy() -> ToolkitSpy:
    """A fresh ToolkitSpy per test."""
    from numsep.adapters.memory import ToolkitSpy

    return ToolkitSpy()


@pytest.fixture
def providers_with_toolkit(toolkit_spy: ToolkitSpy) -> ProviderConfig:
    """Table-backed providers with the ``qt-native`` backend served by ``toolkit_spy``."""
    from numsep.composition import build_testing_providers

    return build_testing_providers(toolkit=toolkit_spy)


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory for tests."""
    from numsep.composition import build_production

    return build_production


@pytest.fixture
def services_factory(
    clear_config_cache: None,
) -> Callable[..., Callable[[], AppServices]]:
    """Return a builder for in-memory services with injected config and providers.

    Replaces only the I/O boundaries: ``get_config`` returns the given data,
    logging stays on the standard library so ``caplog`` works, and the
    providers default to the table-backed ones. Configuration display uses
    the production adapter so its output can be asserted.

    Example:
        def test_probe(cli_runner, services_factory) -> None:
            factory = services_factory({"numsep": {"precision": 3}})
            result = cli_runner.invoke(cli, ["probe", "C"], obj=factory)
    """
    from numsep.adapters.config.display import display_config
    from numsep.adapters.memory import init_logging_in_memory
    from numsep.composition import AppServices, build_testing_providers

    def _create(
        config_data: dict[str, Any] | None = None,
        *,
        providers: ProviderConfig | None = None,
        profiles: list[str | None] | None = None,
    ) -> Callable[[], AppServices]:
        config = Config(config_data or {}, {})

        def _fake_get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
            if profiles is not None:
                profiles.append(profile)
            return config

        services = AppServices(
            get_config=_fake_get_config,
            display_config=display_config,
            init_logging=init_logging_in_memory,
            providers=providers if providers is not None else build_testing_providers(),
        )
        return lambda: services

    return _create
