"""Type-safe domain enums for backends, providers, render paths and output formats."""

from __future__ import annotations

from enum import Enum


class BackendKind(str, Enum):
    """Formatting strategies selectable by callers.

    A kind fixes both the locale-data provider that supplies the separators
    and the rendering path that turns the value into text. The mapping lives
    in :data:`numsep.domain.backends.BACKEND_TABLE`.

    Attributes:
        TEMPLATE_CLDR: CLDR data rendered through a number pattern.
        TEMPLATE_CLDR_OVERRIDE: CLDR data with narrow-character punctuation installed.
        TEMPLATE_POSIX: C library ``localeconv()`` data rendered through a number pattern.
        TEMPLATE_PLATFORM: Minimal ``nl_langinfo`` data rendered through a number pattern.
        QT_NATIVE: Qt ``QLocale`` conversion (requires the ``qt`` extra).
        STREAM_CLDR: CLDR data written through the stream inserter.
        STREAM_POSIX: ``localeconv()`` data written through the stream inserter.
        STREAM_PLATFORM: ``nl_langinfo`` data written through the stream inserter.

    Example:
        >>> BackendKind.STREAM_POSIX.value
        'stream-posix'
        >>> BackendKind("qt-native") is BackendKind.QT_NATIVE
        True
    """

    TEMPLATE_CLDR = "template-cldr"
    TEMPLATE_CLDR_OVERRIDE = "template-cldr-override"
    TEMPLATE_POSIX = "template-posix"
    TEMPLATE_PLATFORM = "template-platform"
    QT_NATIVE = "qt-native"
    STREAM_CLDR = "stream-cldr"
    STREAM_POSIX = "stream-posix"
    STREAM_PLATFORM = "stream-platform"


class ProviderKind(str, Enum):
    """Locale-data sources a backend can draw punctuation from.

    Example:
        >>> ProviderKind.CLDR == "cldr"
        True
    """

    CLDR = "cldr"
    POSIX = "posix"
    PLATFORM = "platform"


class RenderPath(str, Enum):
    """How a resolved locale turns a number into text."""

    TEMPLATE = "template"
    STREAM = "stream"
    TOOLKIT = "toolkit"


class OutputFormat(str, Enum):
    """Output format options for configuration display.

    Inherits from str to allow direct string comparison and Click integration.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


__all__ = [
    "BackendKind",
    "OutputFormat",
    "ProviderKind",
    "RenderPath",
]
