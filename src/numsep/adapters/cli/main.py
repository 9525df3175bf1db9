"""Run the ``numsep`` command group and turn its outcome into an exit code.

Shared by the console script and ``python -m numsep``. Domain errors that
escape a command (unknown locale, bad precision, unreachable backend, invalid
``[numsep]`` settings) become 22 or 78 with a one-line message; anything else
goes through ``lib_cli_exit_tools`` with a traceback when ``--traceback`` is on.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from numsep import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import preserved_traceback_state
from .exit_codes import DOMAIN_ERRORS, ExitCode, report_domain_error

if TYPE_CHECKING:
    from numsep.composition import AppServices


def _report_unexpected(exc: BaseException) -> int:
    verbose = bool(getattr(lib_cli_exit_tools.config, "traceback", False))
    length_limit = TRACEBACK_VERBOSE_LIMIT if verbose else TRACEBACK_SUMMARY_LIMIT
    lib_cli_exit_tools.print_exception_message(trace_back=verbose, length_limit=length_limit)
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _invoke(args: list[str], services_factory: Callable[[], AppServices]) -> int:
    from .root import cli

    try:
        cli.main(args=args, prog_name=__init__conf__.shell_command, obj=services_factory, standalone_mode=False)
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except DOMAIN_ERRORS as exc:
        return int(report_domain_error(exc, command=args[0] if args else None))
    except BaseException as exc:  # noqa: BLE001 - every failure ends as an exit code
        return _report_unexpected(exc)
    return ExitCode.SUCCESS


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run the CLI with *argv* (``sys.argv[1:]`` when None) and return the exit code.

    Args:
        argv: Command-line arguments without the program name.
        restore_traceback: Put the ``--traceback`` switches back afterwards.
        services_factory: Builds the AppServices for the run, normally
            ``numsep.composition.build_production``.

    Raises:
        ValueError: If *services_factory* is missing.

    Example:
        >>> from numsep.composition import build_testing
        >>> main(["format", "1234567", "-l", "de_DE"], services_factory=build_testing)  # doctest: +SKIP
        1.234.567
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    args = list(argv) if argv is not None else sys.argv[1:]
    try:
        with preserved_traceback_state(restore_traceback):
            return _invoke(args, services_factory)
    finally:
        # Worker threads share the runtime with the main thread.
        if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
            lib_log_rich.runtime.shutdown()


__all__ = ["main"]
