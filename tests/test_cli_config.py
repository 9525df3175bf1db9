"""CLI config stories: display, JSON, sections, profiles and --set overrides."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from click.testing import CliRunner, Result

from numsep.adapters import cli as cli_mod

ServicesFactory = Callable[..., Callable[[], Any]]

SAMPLE = {"numsep": {"precision": 2, "locales": ["de_DE.UTF-8", "C"]}, "lib_log_rich": {"console_level": "INFO"}}


@pytest.mark.os_agnostic
def test_bundled_defaults_are_displayed(cli_runner: CliRunner, production_factory: Callable[[], Any]) -> None:
    """The real loader shows the packaged [numsep] defaults."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["config", "--format", "json", "--section", "numsep"], obj=production_factory)

    assert result.exit_code == 0
    assert "default_backend" in result.stdout


@pytest.mark.os_agnostic
def test_human_output_lists_sections(cli_runner: CliRunner, services_factory: ServicesFactory) -> None:
    """Every section is shown with its keys."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["config"], obj=services_factory(SAMPLE))

    assert result.exit_code == 0
    assert "[numsep]" in result.output
    assert "[lib_log_rich]" in result.output
    assert "de_DE.UTF-8" in result.output


@pytest.mark.os_agnostic
def test_json_section(cli_runner: CliRunner, services_factory: ServicesFactory) -> None:
    """--section narrows the JSON output to one table."""
    result: Result = cli_runner.invoke(
        cli_mod.cli, ["config", "--format", "json", "--section", "numsep"], obj=services_factory(SAMPLE)
    )

    assert result.exit_code == 0
    assert "precision" in result.stdout
    assert "console_level" not in result.stdout


@pytest.mark.os_agnostic
def test_unknown_section_fails(cli_runner: CliRunner, services_factory: ServicesFactory) -> None:
    """A missing section is an invalid argument."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["config", "--section", "nope"], obj=services_factory(SAMPLE))

    assert result.exit_code == 22
    assert "not found" in result.stderr


@pytest.mark.os_agnostic
def test_root_profile_reaches_the_loader(cli_runner: CliRunner, services_factory: ServicesFactory) -> None:
    """--profile on the root group is passed to get_config."""
    profiles: list[str | None] = []
    result: Result = cli_runner.invoke(
        cli_mod.cli, ["--profile", "staging", "config"], obj=services_factory(SAMPLE, profiles=profiles)
    )

    assert result.exit_code == 0
    assert profiles == ["staging"]


@pytest.mark.os_agnostic
def test_subcommand_profile_reloads_configuration(cli_runner: CliRunner, services_factory: ServicesFactory) -> None:
    """config --profile reloads once more with the new profile."""
    profiles: list[str | None] = []
    result: Result = cli_runner.invoke(
        cli_mod.cli, ["config", "--profile", "production"], obj=services_factory(SAMPLE, profiles=profiles)
    )

    assert result.exit_code == 0
    assert profiles == [None, "production"]


@pytest.mark.os_agnostic
def test_set_override_is_visible(cli_runner: CliRunner, services_factory: ServicesFactory) -> None:
    """--set changes the displayed value."""
    result: Result = cli_runner.invoke(
        cli_mod.cli,
        ["--set", "numsep.precision=5", "--set", "numsep.default_backend=template-posix", "config", "--format", "json"],
        obj=services_factory(SAMPLE),
    )

    assert result.exit_code == 0
    assert '"precision": 5' in result.stdout
    assert "template-posix" in result.stdout


@pytest.mark.os_agnostic
def test_profile_reload_keeps_set_overrides(cli_runner: CliRunner, services_factory: ServicesFactory) -> None:
    """Root --set overrides are reapplied after a subcommand profile reload."""
    result: Result = cli_runner.invoke(
        cli_mod.cli,
        ["--set", "numsep.precision=7", "config", "--profile", "test", "--format", "json", "--section", "numsep"],
        obj=services_factory(SAMPLE),
    )

    assert result.exit_code == 0
    assert '"precision": 7' in result.stdout
    assert '"precision": 2' not in result.stdout


@pytest.mark.os_agnostic
@pytest.mark.parametrize("override", ["numsep", "numsep.precision", ".precision=1", "numsep..precision=1"])
def test_malformed_set_override_is_a_usage_error(
    cli_runner: CliRunner, services_factory: ServicesFactory, override: str
) -> None:
    """Malformed --set values stop before any command runs."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["--set", override, "config"], obj=services_factory(SAMPLE))
    assert result.exit_code == 2


@pytest.mark.os_agnostic
def test_set_override_on_lib_log_rich(cli_runner: CliRunner, services_factory: ServicesFactory) -> None:
    """Overrides are not limited to the numsep section."""
    result: Result = cli_runner.invoke(
        cli_mod.cli,
        ["--set", "lib_log_rich.console_level=DEBUG", "config", "--format", "json", "--section", "lib_log_rich"],
        obj=services_factory(SAMPLE),
    )

    assert result.exit_code == 0
    assert "DEBUG" in result.stdout
