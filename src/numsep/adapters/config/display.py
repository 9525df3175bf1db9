"""Render the merged configuration through lib_layered_config's Rich display."""

from __future__ import annotations

import lib_log_rich.runtime
from lib_layered_config import Config
from lib_layered_config import OutputFormat as LibOutputFormat
from lib_layered_config import display_config as _lib_display
from rich.console import Console

from numsep.domain.enums import OutputFormat


def display_config(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    console: Console | None = None,
    profile: str | None = None,
) -> None:
    """Print *config*, or only its *section*, as TOML-like text or JSON.

    Pending log records are flushed first so they do not interleave with
    the configuration dump.

    Raises:
        ValueError: If *section* is not present; the message lists the
            sections that are.
    """
    if section is not None and section not in config.as_dict():
        available = ", ".join(sorted(config.as_dict())) or "none"
        raise ValueError(f"Section {section!r} not found in configuration (available: {available})")
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()
    _lib_display(
        config,
        output_format=LibOutputFormat(output_format.value),
        section=section,
        profile=profile,
        console=console,
    )


__all__ = ["display_config"]
