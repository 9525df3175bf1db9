"""Adapters layer - infrastructure and framework integrations.

Contains adapter implementations that connect the application to locale
databases and frameworks.

Contents:
    * :mod:`.cldr` - CLDR locale data and template rendering via Babel
    * :mod:`.libc` - C library locale data via the ``locale`` module
    * :mod:`.qt` - Optional Qt ``QLocale`` formatter via PySide6
    * :mod:`.config` - Configuration loading, display, overrides and settings
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.memory` - In-memory adapters for tests
    * :mod:`.cli` - Click CLI framework integration
"""

from __future__ import annotations

__all__: list[str] = []
