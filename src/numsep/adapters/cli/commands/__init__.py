"""CLI command implementations.

Collects all subcommand functions and re-exports them for registration
with the root CLI group.

Contents:
    * Info command from :mod:`.info`
    * Config command from :mod:`.config`
    * Format command from :mod:`.format_cmd`
    * Inspect command from :mod:`.inspect_cmd`
    * Probe command from :mod:`.probe_cmd`
"""

from __future__ import annotations

from .config import cli_config
from .format_cmd import cli_format
from .info import cli_info
from .inspect_cmd import cli_inspect
from .probe_cmd import cli_probe

__all__ = [
    "cli_config",
    "cli_format",
    "cli_info",
    "cli_inspect",
    "cli_probe",
]
