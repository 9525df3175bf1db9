"""In-memory configuration adapters for testing.

Satisfy the same Protocols as the production adapters without touching the
filesystem or lib_layered_config's layer discovery.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from lib_layered_config import Config

from ...domain.enums import OutputFormat


def get_config_in_memory(
    *,
    profile: str | None = None,
    start_dir: str | None = None,
) -> Config:
    """Return an empty in-memory Config; ``[numsep]`` falls back to model defaults."""
    return Config({}, {})


def make_config_in_memory(data: Mapping[str, Any]) -> Config:
    """Return a Config holding *data* without provenance metadata.

    Example:
        >>> make_config_in_memory({"numsep": {"precision": 3}})["numsep"]["precision"]
        3
    """
    return Config(dict(data), {})


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    """No-op display; satisfies the DisplayConfig protocol."""


__all__ = [
    "display_config_in_memory",
    "get_config_in_memory",
    "make_config_in_memory",
]
