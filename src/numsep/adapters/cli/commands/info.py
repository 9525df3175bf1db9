"""Package metadata command.

Contents:
    * :func:`cli_info` - Display package metadata and reachable backends.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from numsep import __init__conf__

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context

logger = logging.getLogger(__name__)


@click.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
@click.pass_context
def cli_info(ctx: click.Context) -> None:
    """Print resolved metadata and the backends this installation can run.

    Example:
        >>> from click.testing import CliRunner
        >>> from numsep.adapters.cli.root import cli
        >>> from numsep.composition import build_testing
        >>> result = CliRunner().invoke(cli, ["info"], obj=build_testing)
        >>> result.exit_code == 0
        True
    """
    cli_ctx = get_cli_context(ctx)
    with lib_log_rich.runtime.bind(job_id="cli-info", extra={"command": "info"}):
        logger.info("Displaying package information")
        __init__conf__.print_info()
        backends = ", ".join(kind.value for kind in cli_ctx.providers.available_backends())
        click.echo(f"    {'backends'.ljust(len('shell_command'))} = {backends}")


__all__ = ["cli_info"]
