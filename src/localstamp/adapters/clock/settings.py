"""Typed ``[localstamp]`` configuration section.

Bridges lib_layered_config's dictionary output with a Pydantic model,
validating once at the boundary.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, cast

from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from localstamp.domain.behaviors import offset_from_minutes
from localstamp.domain.errors import ConfigurationError

#: Name of the configuration section read by :func:`load_stamp_settings`.
SECTION_NAME = "localstamp"


class StampSettings(BaseModel):
    """Validated settings for the ``now`` command and library helpers.

    Attributes:
        offset_minutes: Fixed local offset to use instead of the host's.
            ``None`` means ask the host.

    Example:
        >>> StampSettings(offset_minutes=540).offset_minutes
        540
        >>> StampSettings().offset_minutes is None
        True
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    offset_minutes: int | None = None

    @field_validator("offset_minutes", mode="before")
    @classmethod
    def _coerce_empty_string_to_none(cls, v: Any) -> Any:
        """Treat blank strings from .env files or environment variables as unset.

        Examples:
            >>> StampSettings._coerce_empty_string_to_none("  ")
            >>> StampSettings._coerce_empty_string_to_none("540")
            '540'
        """
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("offset_minutes")
    @classmethod
    def _validate_range(cls, v: int | None) -> int | None:
        if v is not None:
            offset_from_minutes(v)
        return v


def load_stamp_settings(config: Config) -> StampSettings:
    """Load :class:`StampSettings` from the ``[localstamp]`` section of *config*.

    Raises:
        ConfigurationError: If the section is not a table or holds invalid values.

    Example:
        >>> load_stamp_settings(Config({"localstamp": {"offset_minutes": -300}}, {})).offset_minutes
        -300
        >>> load_stamp_settings(Config({}, {})).offset_minutes is None
        True
    """
    section: object = config.get(SECTION_NAME, default=None)
    if section is None:
        return StampSettings()
    if not isinstance(section, Mapping):
        raise ConfigurationError(f"[{SECTION_NAME}] must be a table, got {type(section).__name__}")
    try:
        return StampSettings.model_validate(dict(cast(Mapping[str, Any], section)))
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid [{SECTION_NAME}] configuration: {exc}") from exc


__all__ = [
    "SECTION_NAME",
    "StampSettings",
    "load_stamp_settings",
]
