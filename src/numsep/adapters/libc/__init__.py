"""C library locale providers (``localeconv`` and ``nl_langinfo``)."""

from __future__ import annotations

from .provider import build_platform_locale, build_posix_locale, grouping_widths, numeric_locale

__all__ = ["build_platform_locale", "build_posix_locale", "grouping_widths", "numeric_locale"]
