"""Locale inspection CLI command.

Contents:
    * :func:`cli_inspect` - Show the grouping configuration each provider builds.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from numsep.application.selection import build_locale, resolve_locale
from numsep.domain.behaviors import inspect_locale
from numsep.domain.enums import BackendKind, ProviderKind
from numsep.domain.errors import UnsupportedLocaleError
from numsep.domain.models import LocaleHandle

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode
from ._shared import BACKEND_CHOICES, exit_on_domain_error, parse_backends

logger = logging.getLogger(__name__)


@click.command("inspect", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("locale_spec", metavar="LOCALE")
@click.option(
    "--provider",
    "provider_names",
    type=click.Choice([kind.value for kind in ProviderKind], case_sensitive=False),
    multiple=True,
    help="Locale-data provider to inspect (repeatable). Default: all",
)
@click.option(
    "--backend",
    "-b",
    "backends",
    type=click.Choice(BACKEND_CHOICES, case_sensitive=False),
    multiple=True,
    help="Inspect the locale a backend resolves, punctuation overrides included (repeatable)",
)
@click.pass_context
def cli_inspect(
    ctx: click.Context, locale_spec: str, provider_names: tuple[str, ...], backends: tuple[str, ...]
) -> None:
    r"""Print grouping, thousands separator and decimal point of LOCALE.

    \b
    One line per provider or backend, e.g.:
    cldr      G: '0x3', T: ',' - 0x2c, D: '.'

    Exits with INVALID_ARGUMENT (22) when no provider can build LOCALE.
    """
    cli_ctx = get_cli_context(ctx)
    providers = cli_ctx.providers
    kinds = parse_backends(backends)
    targets: list[tuple[str, ProviderKind | BackendKind]] = [(kind.value, kind) for kind in kinds]
    if not kinds or provider_names:
        names = provider_names or tuple(kind.value for kind in ProviderKind)
        targets = [(name.lower(), ProviderKind(name.lower())) for name in names] + targets
    width = max(len(label) for label, _ in targets)

    extra = {"command": "inspect", "locale": locale_spec}
    with lib_log_rich.runtime.bind(job_id="cli-inspect", extra=extra), exit_on_domain_error("inspect"):
        failures = 0
        for label, target in targets:
            try:
                handle: LocaleHandle = (
                    build_locale(target, locale_spec, providers=providers)
                    if isinstance(target, ProviderKind)
                    else resolve_locale(target, locale_spec, providers=providers)
                )
            except UnsupportedLocaleError as exc:
                failures += 1
                logger.warning("Locale unavailable", extra={"target": label, "error": str(exc)})
                click.echo(f"{label.ljust(width)} unavailable: {exc}")
                continue
            click.echo(f"{label.ljust(width)} {inspect_locale(handle).describe()}")
        if failures == len(targets):
            raise SystemExit(ExitCode.INVALID_ARGUMENT)


__all__ = ["cli_inspect"]
