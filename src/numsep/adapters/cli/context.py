"""Per-invocation CLI state and the shared traceback switches.

The root command builds one :class:`CLIContext` per run: the services from
the composition root, the configuration with ``--set`` applied, and the
profile it came from. Subcommands read their providers and the validated
``[numsep]`` settings from it.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

from numsep.adapters.config.overrides import apply_overrides
from numsep.adapters.config.settings import ProbeSettings, load_probe_settings

if TYPE_CHECKING:
    from numsep.application.providers import ProviderConfig
    from numsep.composition import AppServices

TracebackState = tuple[bool, bool]
"""(traceback, traceback_force_color) as held by ``lib_cli_exit_tools.config``."""


@dataclass(slots=True)
class CLIContext:
    """State shared by every subcommand of one invocation.

    ``config`` already carries the root ``--set`` overrides; they are kept in
    ``set_overrides`` so a profile reload can apply them again.

    Example:
        >>> from numsep.composition import build_testing
        >>> cli_ctx = CLIContext(False, Config({"numsep": {"precision": 4}}, {}), build_testing())
        >>> cli_ctx.settings().precision
        4
    """

    traceback: bool
    config: Config
    services: AppServices
    profile: str | None = None
    set_overrides: tuple[str, ...] = ()

    @property
    def providers(self) -> ProviderConfig:
        """Provider configuration every formatting call receives."""
        return self.services.providers

    def settings(self) -> ProbeSettings:
        """Validate the ``[numsep]`` section of the active configuration.

        Raises:
            pydantic.ValidationError: If the section holds invalid values.
        """
        return load_probe_settings(self.config.as_dict())

    def reload(self, profile: str | None) -> tuple[Config, str | None]:
        """Configuration for *profile*, or the active one when *profile* is empty.

        A reload reads the layers again and reapplies the root ``--set``
        overrides on top.
        """
        if not profile:
            return self.config, self.profile
        config = self.services.get_config(profile=profile)
        return apply_overrides(config, self.set_overrides), profile


def store_cli_context(
    ctx: click.Context,
    *,
    traceback: bool,
    config: Config,
    services: AppServices,
    profile: str | None = None,
    set_overrides: tuple[str, ...] = (),
) -> None:
    """Attach a fresh :class:`CLIContext` to *ctx*."""
    ctx.obj = CLIContext(
        traceback=traceback,
        config=config,
        services=services,
        profile=profile,
        set_overrides=set_overrides,
    )


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the :class:`CLIContext` the root command stored on *ctx*.

    Raises:
        RuntimeError: If the root command has not run for *ctx*.
    """
    if not isinstance(ctx.obj, CLIContext):
        raise RuntimeError("CLI context not initialized. Call store_cli_context first.")
    return ctx.obj


def apply_traceback_preferences(enabled: bool) -> None:
    """Turn full, coloured tracebacks on or off for error reporting.

    Example:
        >>> apply_traceback_preferences(True)
        >>> bool(lib_cli_exit_tools.config.traceback)
        True
    """
    lib_cli_exit_tools.config.traceback = bool(enabled)
    lib_cli_exit_tools.config.traceback_force_color = bool(enabled)


def snapshot_traceback_state() -> TracebackState:
    """Current traceback switches."""
    return (
        bool(getattr(lib_cli_exit_tools.config, "traceback", False)),
        bool(getattr(lib_cli_exit_tools.config, "traceback_force_color", False)),
    )


def restore_traceback_state(state: TracebackState) -> None:
    """Put back switches captured by :func:`snapshot_traceback_state`."""
    lib_cli_exit_tools.config.traceback, lib_cli_exit_tools.config.traceback_force_color = state


@contextmanager
def preserved_traceback_state(restore: bool = True) -> Iterator[None]:
    """Undo ``--traceback`` changes when the block exits, unless *restore* is False.

    Example:
        >>> before = snapshot_traceback_state()
        >>> with preserved_traceback_state():
        ...     apply_traceback_preferences(not before[0])
        >>> snapshot_traceback_state() == before
        True
    """
    previous = snapshot_traceback_state()
    try:
        yield
    finally:
        if restore:
            restore_traceback_state(previous)


__all__ = [
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
    "get_cli_context",
    "preserved_traceback_state",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]
