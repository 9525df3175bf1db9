"""Static package metadata surfaced to CLI commands and documentation.

Keeps the values in one place so the CLI banner, ``info`` command and the
layered configuration paths agree with ``pyproject.toml``.

Contents:
    * Metadata constants (name, title, version, homepage, author).
    * ``LAYEREDCONF_*`` identifiers used by lib_layered_config path discovery.
    * :func:`print_info` - render the metadata block for ``numsep info``.
"""

from __future__ import annotations

#: Distribution name as published on the package index.
name = "numsep"
#: One-line summary used as CLI help text.
title = "Locale-aware number formatting across CLDR, POSIX, platform and Qt backends"
#: Package version, kept in sync with pyproject.toml.
version = "0.3.0"
#: Project homepage.
homepage = "https://github.com/numsep/numsep"
#: Maintainer credit.
author = "numsep maintainers"
author_email = "maintainers@numsep.dev"
#: Console script name.
shell_command = "numsep"

#: Vendor component of macOS/Windows configuration paths.
LAYEREDCONF_VENDOR = "numsep"
#: Application component of macOS/Windows configuration paths.
LAYEREDCONF_APP = "numsep"
#: Slug used for XDG configuration paths on Linux.
LAYEREDCONF_SLUG = "numsep"


def print_info() -> None:
    """Print the package metadata block.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for numsep:
        ...
    """
    fields = (
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    )
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "author_email",
    "homepage",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
