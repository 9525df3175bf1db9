"""In-memory logging adapter for testing.

Starts a quiet lib_log_rich runtime so commands can open their log scopes,
but leaves the standard ``logging`` module untouched so tests can use
``caplog``.
"""

from __future__ import annotations

import lib_log_rich.runtime
from lib_layered_config import Config

from numsep import __init__conf__


def init_logging_in_memory(config: Config) -> None:
    """Initialise lib_log_rich with console output limited to CRITICAL.

    *config* is ignored. Later calls return immediately, as does a call
    made after the production setup already ran.
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.runtime.init(
        lib_log_rich.runtime.RuntimeConfig(
            service=__init__conf__.name,
            environment="test",
            console_level="CRITICAL",
        )
    )


__all__ = ["init_logging_in_memory"]
