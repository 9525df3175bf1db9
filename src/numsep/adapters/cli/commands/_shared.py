"""Shared helpers for CLI command modules.

Internal module (underscore prefix) providing the patterns every formatting
command uses.

Contents:
    * :func:`load_settings` - Validate the ``[numsep]`` section or exit with CONFIG_ERROR.
    * :func:`exit_on_domain_error` - Map domain exceptions to exit codes.
    * :func:`parse_backends` - Convert ``--backend`` choices to BackendKind.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from contextlib import contextmanager

from pydantic import ValidationError

from numsep.adapters.config.settings import ProbeSettings
from numsep.domain.enums import BackendKind

from ..context import CLIContext
from ..exit_codes import DOMAIN_ERRORS, report_domain_error

#: Values accepted by every ``--backend`` option.
BACKEND_CHOICES: tuple[str, ...] = tuple(kind.value for kind in BackendKind)


def load_settings(cli_ctx: CLIContext) -> ProbeSettings:
    """Return the validated ``[numsep]`` settings of the active configuration.

    Raises:
        SystemExit: With CONFIG_ERROR (78) when the section does not validate.
    """
    try:
        return cli_ctx.settings()
    except ValidationError as exc:
        raise SystemExit(report_domain_error(exc, command="settings")) from exc


@contextmanager
def exit_on_domain_error(command: str) -> Iterator[None]:
    """Turn locale, precision and configuration errors into exit codes.

    Raises:
        SystemExit: INVALID_ARGUMENT (22) for unknown locales and bad
            precision, CONFIG_ERROR (78) for backends that cannot run.
    """
    try:
        yield
    except DOMAIN_ERRORS as exc:
        raise SystemExit(report_domain_error(exc, command=command)) from exc


def parse_backends(values: Iterable[str]) -> tuple[BackendKind, ...]:
    """Convert raw ``--backend`` values, keeping their order.

    Example:
        >>> parse_backends(["STREAM-POSIX", "template-cldr"])
        (<BackendKind.STREAM_POSIX: 'stream-posix'>, <BackendKind.TEMPLATE_CLDR: 'template-cldr'>)
    """
    return tuple(BackendKind(value.lower()) for value in values)


__all__ = [
    "BACKEND_CHOICES",
    "exit_on_domain_error",
    "load_settings",
    "parse_backends",
]
