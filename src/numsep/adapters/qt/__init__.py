"""Qt toolkit formatter (optional ``numsep[qt]`` extra, PySide6)."""

from __future__ import annotations

from .toolkit import format_with_qlocale, qt_available

__all__ = ["format_with_qlocale", "qt_available"]
