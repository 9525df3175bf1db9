"""POSIX-conventional exit codes for CLI error paths.

Provides a single :class:`ExitCode` enum so every ``SystemExit`` raised by a
CLI command carries a meaningful, grep-friendly integer instead of a bare ``1``.

Signal codes (130, 141, 143) are informational constants only; the
application never raises ``SystemExit`` with these values because
``lib_cli_exit_tools`` handles signal-to-exit-code translation.

Contents:
    * :class:`ExitCode` - IntEnum of all exit codes used by this application.
    * :data:`DOMAIN_ERRORS` - Errors reported without a traceback.
    * :func:`exit_code_for` - Exit code owed for a domain error.
    * :func:`report_domain_error` - Print a domain error and return its exit code.
"""

from __future__ import annotations

import logging
from enum import IntEnum

import rich_click as click
from pydantic import ValidationError

from numsep.domain.errors import ConfigurationError, InvalidPrecisionError, UnsupportedLocaleError

logger = logging.getLogger(__name__)


class ExitCode(IntEnum):
    """POSIX-conventional exit codes for CLI error paths.

    * 0-1: generic success / failure
    * 22: EINVAL - unknown or malformed locale, negative precision
    * 78: EX_CONFIG (sysexits.h) - unreachable backend, invalid ``[numsep]`` settings
    * 128+N: signal N (informational only)

    Example:
        >>> ExitCode.SUCCESS
        <ExitCode.SUCCESS: 0>
        >>> int(ExitCode.CONFIG_ERROR)
        78
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    INVALID_ARGUMENT = 22
    CONFIG_ERROR = 78
    SIGNAL_INT = 130
    BROKEN_PIPE = 141
    SIGNAL_TERM = 143


#: Errors that end a run with a documented exit code instead of a traceback.
DOMAIN_ERRORS: tuple[type[Exception], ...] = (
    UnsupportedLocaleError,
    InvalidPrecisionError,
    ConfigurationError,
    ValidationError,
)


def exit_code_for(exc: BaseException) -> ExitCode | None:
    """Exit code owed for *exc*, or ``None`` when it is not a domain error.

    Examples:
        >>> exit_code_for(UnsupportedLocaleError("xx_XX"))
        <ExitCode.INVALID_ARGUMENT: 22>
        >>> exit_code_for(ConfigurationError("no toolkit"))
        <ExitCode.CONFIG_ERROR: 78>
        >>> exit_code_for(KeyError("x")) is None
        True
    """
    if isinstance(exc, (UnsupportedLocaleError, InvalidPrecisionError)):
        return ExitCode.INVALID_ARGUMENT
    if isinstance(exc, (ConfigurationError, ValidationError)):
        return ExitCode.CONFIG_ERROR
    return None


def report_domain_error(exc: Exception, *, command: str | None = None) -> ExitCode:
    """Log *exc*, print it to stderr and return its exit code."""
    code = exit_code_for(exc) or ExitCode.GENERAL_ERROR
    logger.error("Command failed", extra={"command": command, "error": str(exc), "exit_code": int(code)})
    if isinstance(exc, ValidationError):
        click.echo(f"\nError: invalid [numsep] configuration:\n{exc}", err=True)
    else:
        click.echo(f"Error: {exc}", err=True)
    return code


__all__ = [
    "DOMAIN_ERRORS",
    "ExitCode",
    "exit_code_for",
    "report_domain_error",
]
