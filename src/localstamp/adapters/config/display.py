"""Print a loaded configuration with lib_layered_config's Rich renderer."""

from __future__ import annotations

import lib_log_rich.runtime
from lib_layered_config import Config
from lib_layered_config import OutputFormat as RenderFormat
from lib_layered_config import display_config as render_config

from localstamp.domain.enums import OutputFormat


def display_config(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    """Print *config*, or only its *section*, with provenance for *profile*.

    Buffered log lines are flushed first so they never land inside the
    rendered tables.

    Raises:
        ValueError: When *section* is not in *config*.
    """
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()
    render_config(config, output_format=RenderFormat(output_format.value), section=section, profile=profile)


__all__ = ["display_config"]
