"""Number formatting CLI command.

Contents:
    * :func:`cli_format` - Format one number for a locale with one or more backends.
"""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation

import lib_log_rich.runtime
import rich_click as click

from numsep.application.formatting import format_decimal, format_integer
from numsep.application.providers import ProviderConfig
from numsep.domain.enums import BackendKind

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ._shared import BACKEND_CHOICES, exit_on_domain_error, load_settings, parse_backends

logger = logging.getLogger(__name__)


def parse_number(raw: str) -> int | Decimal:
    """Parse *raw* as an integer, or else as a finite decimal.

    Raises:
        click.BadParameter: If *raw* is not a finite number.

    Examples:
        >>> parse_number("1234567890")
        1234567890
        >>> parse_number("-1234.5")
        Decimal('-1234.5')
    """
    text = raw.strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        number = Decimal(text)
    except InvalidOperation as exc:
        raise click.BadParameter(f"{raw!r} is not a number", param_hint="VALUE") from exc
    if not number.is_finite():
        raise click.BadParameter(f"{raw!r} is not a finite number", param_hint="VALUE")
    return number


def _render(
    number: int | Decimal, precision: int | None, locale_spec: str, kind: BackendKind, providers: ProviderConfig
) -> str:
    if precision is None and isinstance(number, int):
        return format_integer(number, locale_spec, kind, providers=providers)
    return format_decimal(number, precision if precision is not None else 0, locale_spec, kind, providers=providers)


@click.command("format", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("value")
@click.option("--locale", "-l", "locale_spec", required=True, help="Locale identifier, e.g. 'de_DE.UTF-8' or 'C'")
@click.option(
    "--backend",
    "-b",
    "backends",
    type=click.Choice(BACKEND_CHOICES, case_sensitive=False),
    multiple=True,
    help="Backend to format with (repeatable). Default: numsep.default_backend",
)
@click.option(
    "--precision",
    "-p",
    type=int,
    default=None,
    help="Fraction digits. Integers are grouped without fraction when omitted; "
    "decimals fall back to numsep.precision",
)
@click.pass_context
def cli_format(
    ctx: click.Context, value: str, locale_spec: str, backends: tuple[str, ...], precision: int | None
) -> None:
    """Format VALUE with the grouping and decimal point of a locale.

    Prefix negative values with ``--`` so they are not read as options:
    ``numsep format -l de_DE -- -1234.5``.

    With one backend only the formatted text is printed; with several each
    line is prefixed by its backend name.
    """
    cli_ctx = get_cli_context(ctx)
    settings = load_settings(cli_ctx)
    number = parse_number(value)
    kinds = parse_backends(backends) or (settings.default_backend,)
    if precision is None and not isinstance(number, int):
        precision = settings.precision

    extra = {"command": "format", "locale": locale_spec, "backends": [kind.value for kind in kinds]}
    with lib_log_rich.runtime.bind(job_id="cli-format", extra=extra), exit_on_domain_error("format"):
        providers = cli_ctx.providers
        providers.require(kinds)
        logger.info("Formatting number", extra={"precision": precision})
        for kind in kinds:
            text = _render(number, precision, locale_spec, kind, providers)
            click.echo(text if len(kinds) == 1 else f"{kind.value}: {text}")


__all__ = ["cli_format", "parse_number"]
