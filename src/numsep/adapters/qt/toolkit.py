"""Delegate number formatting to Qt's ``QLocale``.

PySide6 is an optional dependency. It is imported on first use so that the
rest of the package loads without it; :func:`qt_available` lets the
composition root decide whether to register the toolkit at all.
"""

from __future__ import annotations

import importlib.util


def qt_available() -> bool:
    """True when PySide6 is installed."""
    return importlib.util.find_spec("PySide6") is not None


def format_with_qlocale(value: int | float, locale_spec: str, *, precision: int | None = None) -> str:
    """Format *value* with ``QLocale(locale_spec)``.

    Integers go through ``QLocale.toString(int)``; with *precision* the value
    is rendered fixed-point (``'f'``) with that many fraction digits.
    """
    from PySide6.QtCore import QLocale

    qlocale = QLocale(locale_spec)
    if precision is None:
        return qlocale.toString(int(value))
    return qlocale.toString(float(value), "f", precision)


__all__ = ["format_with_qlocale", "qt_available"]
