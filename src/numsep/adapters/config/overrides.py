"""``--set SECTION.KEY=VALUE`` overrides layered on top of a loaded Config.

Values are read as JSON where possible (numbers, booleans, arrays) and kept
as plain strings otherwise. Fractional numbers whose float form would drop
digits stay strings, so ``numsep.decimal_value`` keeps every digit typed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]
"""Values :func:`coerce_value` can produce."""


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """One parsed ``--set`` entry."""

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue

    def merge_into(self, target: dict[str, dict[str, object]]) -> None:
        """Write this override into the nested *target* mapping.

        Raises:
            TypeError: If an intermediate key already holds a non-table value.

        Example:
            >>> tree: dict[str, dict[str, object]] = {}
            >>> ConfigOverride("numsep", ("precision",), 3).merge_into(tree)
            >>> tree
            {'numsep': {'precision': 3}}
        """
        node: dict[str, object] = target.setdefault(self.section, {})
        for part in self.key_path[:-1]:
            child = node.setdefault(part, {})
            if not isinstance(child, dict):
                raise TypeError(f"Expected dict at key {part!r}, got {type(child).__name__}")
            node = cast("dict[str, object]", child)
        node[self.key_path[-1]] = self.value


def parse_override(raw: str) -> ConfigOverride:
    """Split ``SECTION.KEY[.SUBKEY...]=VALUE`` at the first ``=``.

    Raises:
        ValueError: Without ``=``, without a dot in the key, or with an
            empty section or key component.

    Examples:
        >>> override = parse_override("numsep.precision=3")
        >>> override.section, override.key_path, override.value
        ('numsep', ('precision',), 3)
        >>> parse_override('numsep.locales=["de_DE","C"]').value
        ['de_DE', 'C']
        >>> parse_override("lib_log_rich.console_level=DEBUG").value
        'DEBUG'
    """
    path, separator, text = raw.partition("=")
    if not separator:
        raise ValueError(f"Invalid override {raw!r}: must contain '='")
    section, dot, key = path.partition(".")
    if not dot:
        raise ValueError(f"Invalid override {raw!r}: key must contain at least one dot (SECTION.KEY)")
    if not section:
        raise ValueError(f"Invalid override {raw!r}: section name is empty")
    key_path = tuple(key.split("."))
    if not all(key_path):
        raise ValueError(f"Invalid override {raw!r}: key path contains empty component")
    return ConfigOverride(section=section, key_path=key_path, value=coerce_value(text))


def coerce_value(raw: str) -> CoercedValue:
    """Read *raw* as JSON, falling back to the string itself.

    Examples:
        >>> coerce_value("true"), coerce_value("42"), coerce_value("2.5")
        (True, 42, 2.5)
        >>> coerce_value("1234567.8911440000001")
        '1234567.8911440000001'
        >>> coerce_value("stream-posix")
        'stream-posix'
        >>> coerce_value("null") is None
        True
        >>> coerce_value("")
        ''
    """
    if raw == "":
        return ""
    try:
        value = orjson.loads(raw)
    except orjson.JSONDecodeError:
        return raw
    if isinstance(value, float) and repr(value) != raw.strip():
        return raw.strip()
    return cast(CoercedValue, value)


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Return *config* with every override deep-merged in.

    Raises:
        ValueError: If any override string is malformed or collides with a
            non-table value.

    Examples:
        >>> meta = {"numsep.precision": {"layer": "default", "path": None, "key": "numsep.precision"}}
        >>> cfg = Config({"numsep": {"precision": 2}}, meta)
        >>> apply_overrides(cfg, ("numsep.precision=4",))["numsep"]["precision"]
        4
        >>> apply_overrides(cfg, ()) is cfg
        True
    """
    if not raw_overrides:
        return config
    tree: dict[str, dict[str, object]] = {}
    for raw in raw_overrides:
        override = parse_override(raw)
        try:
            override.merge_into(tree)
        except TypeError as exc:
            raise ValueError(f"Invalid override {raw!r}: {exc}") from exc
    return config.with_overrides(tree)


__all__ = [
    "CoercedValue",
    "ConfigOverride",
    "apply_overrides",
    "coerce_value",
    "parse_override",
]
