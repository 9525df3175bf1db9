"""lib_log_rich runtime setup shared by the console script and ``python -m numsep``.

Formatting code logs through the standard :mod:`logging` module (for
example the ``Truncating ...`` warnings of the punctuation builder); this
module initialises lib_log_rich once from the ``[lib_log_rich]`` section and
bridges those records into it.
"""

from __future__ import annotations

from typing import cast

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, field_validator

from numsep import __init__conf__


class LoggingConfigModel(BaseModel):
    """Validated ``[lib_log_rich]`` section.

    ``service`` falls back to the package name. Keys not declared here pass
    through to :class:`lib_log_rich.runtime.RuntimeConfig` unchanged.

    Example:
        >>> model = LoggingConfigModel(console_level="debug")
        >>> model.console_level, model.environment
        ('DEBUG', 'prod')
        >>> LoggingConfigModel(service="").service_name
        'numsep'
    """

    model_config = ConfigDict(extra="allow")

    service: str | None = None
    environment: str = "prod"
    console_level: str | None = None

    @field_validator("console_level", mode="before")
    @classmethod
    def _upper_level(cls, v: object) -> object:
        return v.strip().upper() if isinstance(v, str) else v

    @property
    def service_name(self) -> str:
        """Configured service, or the package name when unset or empty."""
        return self.service or __init__conf__.name


def _build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    section: object = config.get("lib_log_rich", default={})
    parsed = LoggingConfigModel.model_validate(cast("dict[str, object]", section) if section else {})
    passthrough = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)
    return lib_log_rich.runtime.RuntimeConfig(
        service=parsed.service_name,
        environment=parsed.environment,
        **passthrough,
    )


def init_logging(config: Config) -> None:
    """Initialise lib_log_rich from *config* unless it is already running.

    Loads ``.env`` files first so ``LOG_*`` variables apply, then attaches
    the standard-library bridge. Later calls return immediately.

    Example:
        >>> init_logging(Config({"lib_log_rich": {"environment": "test"}}, {}))  # doctest: +SKIP
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(_build_runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()


__all__ = [
    "LoggingConfigModel",
    "init_logging",
]
