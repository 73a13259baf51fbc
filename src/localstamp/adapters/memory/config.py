"""Config stand-ins: nothing on disk is read and nothing is printed."""

from __future__ import annotations

from lib_layered_config import Config

from ...domain.enums import OutputFormat


def get_config_in_memory(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Return an empty Config whatever the profile, so host offsets apply."""
    return Config({}, {})


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    """Accept the call and print nothing."""


__all__ = ["display_config_in_memory", "get_config_in_memory"]
