"""Start lib_log_rich from the ``[lib_log_rich]`` section, once per process."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, cast

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, ValidationError

from localstamp import __init__conf__
from localstamp.domain.errors import ConfigurationError

LOG_SECTION = "lib_log_rich"


class LogSettings(BaseModel):
    """``[lib_log_rich]``: keys beyond these two go to ``RuntimeConfig`` as given.

    Example:
        >>> LogSettings().service, LogSettings().environment
        ('localstamp', 'prod')
    """

    model_config = ConfigDict(extra="allow")

    service: str = __init__conf__.name
    environment: str = "prod"

    def runtime_config(self) -> lib_log_rich.runtime.RuntimeConfig:
        return lib_log_rich.runtime.RuntimeConfig(**self.model_dump(exclude_none=True))


def load_log_settings(config: Config) -> LogSettings:
    """Validate ``[lib_log_rich]``; a missing section means defaults.

    Raises:
        ConfigurationError: When the section is not a table or a value has
            the wrong type.
    """
    section: object = config.get(LOG_SECTION, default=None)
    if section is None:
        return LogSettings()
    if not isinstance(section, Mapping):
        raise ConfigurationError(f"[{LOG_SECTION}] must be a table, got {type(section).__name__}")
    try:
        return LogSettings.model_validate(dict(cast(Mapping[str, Any], section)))
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid [{LOG_SECTION}] configuration: {exc}") from exc


def init_logging(config: Config) -> None:
    """Start the lib_log_rich runtime and route stdlib ``logging`` into it.

    The section is validated on every call. ``.env`` is loaded first so
    ``LOG_*`` variables apply. Once the runtime is up, later calls start
    nothing new.
    """
    settings = load_log_settings(config)
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(settings.runtime_config())
    lib_log_rich.runtime.attach_std_logging()


__all__ = ["LOG_SECTION", "LogSettings", "init_logging", "load_log_settings"]
