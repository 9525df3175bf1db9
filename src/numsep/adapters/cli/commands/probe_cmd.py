"""Cross-backend probe CLI command.

Contents:
    * :func:`cli_probe` - Format the sample values for every locale and backend.
    * :func:`render_probe` - Human-readable probe report.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import replace

import lib_log_rich.runtime
import orjson
import rich_click as click

from numsep.application.probe import LocaleProbe, run_probe
from numsep.domain.enums import OutputFormat

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ._shared import BACKEND_CHOICES, exit_on_domain_error, load_settings, parse_backends

logger = logging.getLogger(__name__)


def render_probe(results: Sequence[LocaleProbe]) -> str:
    """Render probe results in the ``Locale`` / ``Backend`` block layout.

    Example:
        >>> from numsep.application.probe import BackendSample
        >>> from numsep.domain.enums import BackendKind
        >>> probe = LocaleProbe("C", [BackendSample(BackendKind.STREAM_POSIX, "1234567.89", "1234567890", "", ".")])
        >>> print(render_probe([probe]))
        ====
        Locale: C
        ====
        ==
        Backend: stream-posix
        ==
        DBL 1234567.89
        INT 1234567890
        T: '', D: '.'
    """
    lines: list[str] = []
    for probe in results:
        lines.extend(("====", f"Locale: {probe.locale}", "===="))
        for sample in probe.backends:
            lines.extend(("==", f"Backend: {sample.backend.value}", "=="))
            if sample.error is not None:
                lines.append(f"Error: {sample.error}")
                continue
            lines.append(f"DBL {sample.decimal_text}")
            lines.append(f"INT {sample.integer_text}")
            lines.append(f"T: '{sample.thousands_sep}', D: '{sample.decimal_point}'")
        for inspected in probe.providers:
            lines.extend(("==", f"Locale details generated for {inspected.provider.value} provider:", "=="))
            if inspected.report is None:
                lines.append(f"Error: {inspected.error}")
            else:
                lines.append(inspected.report.describe())
    return "\n".join(lines)


@click.command("probe", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("locales", nargs=-1, metavar="[LOCALE]...")
@click.option(
    "--backend",
    "-b",
    "backends",
    type=click.Choice(BACKEND_CHOICES, case_sensitive=False),
    multiple=True,
    help="Backend to probe (repeatable). Default: numsep.backends, else every available backend",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="Output format (human-readable or JSON)",
)
@click.pass_context
def cli_probe(ctx: click.Context, locales: tuple[str, ...], backends: tuple[str, ...], output_format: str) -> None:
    """Format the sample integer and decimal for each LOCALE with each backend.

    Separators are read back from between the configured marker digits and
    every provider's view of the locale is printed after the samples.
    Locales default to ``numsep.locales``.
    """
    cli_ctx = get_cli_context(ctx)
    settings = load_settings(cli_ctx)
    providers = cli_ctx.providers
    plan = settings.to_plan(providers.available_backends())
    if locales:
        plan = replace(plan, locales=locales)
    if backends:
        plan = replace(plan, backends=parse_backends(backends))
    fmt = OutputFormat(output_format.lower())

    extra = {"command": "probe", "locales": list(plan.locales), "format": fmt.value}
    with lib_log_rich.runtime.bind(job_id="cli-probe", extra=extra), exit_on_domain_error("probe"):
        logger.info("Probing backends", extra={"backends": [kind.value for kind in plan.backends]})
        results = run_probe(plan, providers=providers)
    if fmt is OutputFormat.JSON:
        click.echo(orjson.dumps(results, option=orjson.OPT_INDENT_2).decode("utf-8"))
    else:
        click.echo(render_probe(results))


__all__ = ["cli_probe", "render_probe"]
