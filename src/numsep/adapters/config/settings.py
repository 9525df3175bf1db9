"""Probe settings model and loader for the ``[numsep]`` configuration section.

Provides the ProbeSettings Pydantic model for validated, immutable probe
defaults and the loader that creates it from configuration dictionaries.
"""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from typing import Any, cast

from pydantic import BaseModel, ConfigDict, Field, field_validator

from numsep.application.probe import ProbePlan
from numsep.domain.enums import BackendKind


def _default_locales() -> list[str]:
    return ["pl_PL.UTF-8", "ru_RU.UTF-8", "de_DE.UTF-8", "en_US.UTF-8", "C"]


class ProbeSettings(BaseModel):
    """Validated, immutable probe and formatting defaults.

    An empty ``backends`` list means "every backend this installation can
    run".

    Example:
        >>> settings = ProbeSettings(locales="de_DE", precision=3)
        >>> settings.locales
        ['de_DE']
        >>> settings.default_backend
        <BackendKind.STREAM_CLDR: 'stream-cldr'>
    """

    model_config = ConfigDict(frozen=True)

    locales: list[str] = Field(default_factory=_default_locales)
    backends: list[BackendKind] = Field(default_factory=list)
    default_backend: BackendKind = BackendKind.STREAM_CLDR
    integer_value: int = 1234567890
    decimal_value: Decimal = Decimal("1234567.891144")
    precision: int = Field(default=2, ge=0)
    start_marker: str = Field(default="7", min_length=1)
    end_marker: str = Field(default="8", min_length=1)

    @field_validator("locales", "backends", mode="before")
    @classmethod
    def _coerce_string_to_list(cls, v: Any) -> list[Any]:
        """Coerce single or comma-separated strings to lists.

        Environment variables and .env files provide strings instead of TOML
        arrays. Empty strings become empty lists.

        Examples:
            >>> ProbeSettings._coerce_string_to_list("de_DE, C")
            ['de_DE', 'C']
            >>> ProbeSettings._coerce_string_to_list("")
            []
        """
        if isinstance(v, str):
            return [item.strip() for item in v.split(",") if item.strip()]
        if isinstance(v, list):
            return cast(list[Any], v)
        return v

    @field_validator("decimal_value", mode="before")
    @classmethod
    def _coerce_float_via_repr(cls, v: Any) -> Any:
        """Convert floats through ``repr`` so TOML ``1234567.891144`` stays exact."""
        if isinstance(v, float):
            return Decimal(repr(v))
        return v

    def to_plan(self, available: tuple[BackendKind, ...]) -> ProbePlan:
        """Build the probe plan, falling back to *available* backends.

        Example:
            >>> plan = ProbeSettings(locales=["C"]).to_plan((BackendKind.STREAM_POSIX,))
            >>> plan.backends
            (<BackendKind.STREAM_POSIX: 'stream-posix'>,)
        """
        return ProbePlan(
            locales=tuple(self.locales),
            backends=tuple(self.backends) if self.backends else available,
            integer_value=self.integer_value,
            decimal_value=self.decimal_value,
            precision=self.precision,
            start_marker=self.start_marker,
            end_marker=self.end_marker,
        )


def load_probe_settings(config_dict: Mapping[str, Any]) -> ProbeSettings:
    """Load ProbeSettings from a configuration dictionary.

    Example:
        >>> load_probe_settings({"numsep": {"precision": 4}}).precision
        4
        >>> load_probe_settings({}).integer_value
        1234567890
    """
    section: Any = config_dict.get("numsep", {})
    if not isinstance(section, Mapping):
        return ProbeSettings.model_validate(section)
    return ProbeSettings.model_validate(dict(cast(Mapping[str, Any], section)))


__all__ = ["ProbeSettings", "load_probe_settings"]
