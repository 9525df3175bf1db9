"""CLI core stories: traceback, main entry, help, info, version, unknown command."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner, Result

from numsep import __init__conf__
from numsep.adapters import cli as cli_mod
from numsep.composition import build_production, build_testing


def _raise_runtime_error() -> None:
    raise RuntimeError("I should fail")


@pytest.mark.os_agnostic
def test_snapshot_traceback_state_returns_disabled_by_default(managed_traceback_state: None) -> None:
    """snapshot_traceback_state returns both flags disabled initially."""
    assert cli_mod.snapshot_traceback_state() == (False, False)


@pytest.mark.os_agnostic
def test_apply_traceback_preferences_enables_both_flags(managed_traceback_state: None) -> None:
    """apply_traceback_preferences(True) enables traceback and force_color."""
    cli_mod.apply_traceback_preferences(True)

    assert lib_cli_exit_tools.config.traceback is True
    assert lib_cli_exit_tools.config.traceback_force_color is True


@pytest.mark.os_agnostic
def test_restore_traceback_state_resets_flags_to_previous(managed_traceback_state: None) -> None:
    """restore_traceback_state resets flags to their pre-apply values."""
    previous = cli_mod.snapshot_traceback_state()
    cli_mod.apply_traceback_preferences(True)

    cli_mod.restore_traceback_state(previous)

    assert lib_cli_exit_tools.config.traceback is False
    assert lib_cli_exit_tools.config.traceback_force_color is False


@pytest.mark.os_agnostic
def test_traceback_flag_is_active_during_info_command(
    monkeypatch: pytest.MonkeyPatch,
    managed_traceback_state: None,
) -> None:
    """--traceback enables both flags during command execution."""
    notes: list[tuple[bool, bool]] = []

    def record() -> None:
        notes.append(
            (
                lib_cli_exit_tools.config.traceback,
                lib_cli_exit_tools.config.traceback_force_color,
            )
        )

    monkeypatch.setattr(__init__conf__, "print_info", record)

    exit_code = cli_mod.main(["--traceback", "info"], services_factory=build_production)

    assert exit_code == 0
    assert notes == [(True, True)]


@pytest.mark.os_agnostic
def test_traceback_flags_restored_after_info_command(
    monkeypatch: pytest.MonkeyPatch,
    managed_traceback_state: None,
) -> None:
    """--traceback flags are restored to disabled after command completes."""
    monkeypatch.setattr(__init__conf__, "print_info", lambda: None)

    cli_mod.main(["--traceback", "info"], services_factory=build_production)

    assert lib_cli_exit_tools.config.traceback is False
    assert lib_cli_exit_tools.config.traceback_force_color is False


@pytest.mark.os_agnostic
def test_when_main_is_called_it_invokes_cli_with_services_factory(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Verify main() invokes CLI with services_factory passed via ctx.obj."""
    result = cli_mod.main(["info"], services_factory=build_production)

    assert result == 0
    captured = capsys.readouterr()
    assert __init__conf__.name in captured.out


@pytest.mark.os_agnostic
def test_main_formats_through_the_testing_services(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """main() returns 0 and prints the formatted number."""
    exit_code = cli_mod.main(["format", "1234567", "-l", "de_DE"], services_factory=build_testing)

    assert exit_code == 0
    assert capsys.readouterr().out.strip() == "1.234.567"


@pytest.mark.os_agnostic
def test_main_returns_the_domain_exit_code(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """SystemExit codes raised by commands become main()'s return value."""
    exit_code = cli_mod.main(["format", "1", "-l", "xx_XX"], services_factory=build_testing)
    assert exit_code == 22


@pytest.mark.os_agnostic
def test_when_cli_runs_without_arguments_help_is_printed(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    """Verify CLI with no arguments displays help text."""
    result = cli_runner.invoke(cli_mod.cli, [], obj=production_factory)

    assert result.exit_code == 0
    assert "Usage:" in result.output


@pytest.mark.os_agnostic
def test_help_lists_every_command(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    """The command group registers its five subcommands."""
    result = cli_runner.invoke(cli_mod.cli, ["--help"], obj=production_factory)

    for name in ("info", "config", "format", "inspect", "probe"):
        assert name in result.output


@pytest.mark.os_agnostic
def test_when_main_receives_no_arguments_help_is_shown(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Verify main with no args shows help."""
    exit_code = cli_mod.main([], services_factory=build_production)

    assert exit_code == 0
    captured = capsys.readouterr()
    assert "Usage:" in captured.out


@pytest.mark.os_agnostic
def test_version_option_prints_the_version(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    """--version reports shell command and version."""
    result = cli_runner.invoke(cli_mod.cli, ["--version"], obj=production_factory)

    assert result.exit_code == 0
    assert f"{__init__conf__.shell_command} version {__init__conf__.version}" in result.output


@pytest.mark.os_agnostic
def test_traceback_flag_displays_full_exception_traceback(
    monkeypatch: pytest.MonkeyPatch,
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
    strip_ansi: Callable[[str], str],
) -> None:
    """--traceback prints the complete traceback on failure."""
    monkeypatch.setattr(__init__conf__, "print_info", _raise_runtime_error)

    exit_code = cli_mod.main(["--traceback", "info"], services_factory=build_testing)

    plain_err = strip_ansi(capsys.readouterr().err)

    assert exit_code != 0
    assert "Traceback (most recent call last)" in plain_err
    assert "RuntimeError: I should fail" in plain_err
    assert "[TRUNCATED" not in plain_err
    assert lib_cli_exit_tools.config.traceback is False
    assert lib_cli_exit_tools.config.traceback_force_color is False


@pytest.mark.os_agnostic
def test_unexpected_error_propagates_through_the_runner(
    monkeypatch: pytest.MonkeyPatch,
    cli_runner: CliRunner,
    services_factory: Callable[..., Callable[[], Any]],
) -> None:
    """Errors outside the domain are not turned into exit codes by commands."""
    monkeypatch.setattr(__init__conf__, "print_info", _raise_runtime_error)

    result: Result = cli_runner.invoke(cli_mod.cli, ["info"], obj=services_factory())

    assert result.exit_code != 0
    assert isinstance(result.exception, RuntimeError)


@pytest.mark.os_agnostic
def test_info_command_displays_project_metadata(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    """info command displays project name and version."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["info"], obj=production_factory)

    assert result.exit_code == 0
    assert f"Info for {__init__conf__.name}:" in result.output
    assert __init__conf__.version in result.output


@pytest.mark.os_agnostic
def test_info_command_lists_reachable_backends(
    cli_runner: CliRunner,
    services_factory: Callable[..., Callable[[], Any]],
) -> None:
    """Without a toolkit qt-native is not listed."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["info"], obj=services_factory())

    backends_line = next(line for line in result.output.splitlines() if line.strip().startswith("backends"))
    assert "stream-cldr" in backends_line
    assert "qt-native" not in backends_line


@pytest.mark.os_agnostic
def test_unknown_command_shows_no_such_command_error(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    """Unknown command produces 'No such command' error."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["does-not-exist"], obj=production_factory)

    assert result.exit_code != 0
    assert "No such command" in result.output


@pytest.mark.os_agnostic
def test_restore_traceback_false_keeps_flags_enabled(
    managed_traceback_state: None,
) -> None:
    """restore_traceback=False leaves traceback flags enabled after command."""
    cli_mod.apply_traceback_preferences(False)

    cli_mod.main(["--traceback", "info"], restore_traceback=False, services_factory=build_production)

    assert lib_cli_exit_tools.config.traceback is True
    assert lib_cli_exit_tools.config.traceback_force_color is True
