"""Configuration adapter: layered loading, ``--set`` overrides and display."""

from __future__ import annotations

from .display import display_config
from .loader import DEFAULT_CONFIG_FILE, get_config
from .overrides import apply_overrides

__all__ = ["DEFAULT_CONFIG_FILE", "apply_overrides", "display_config", "get_config"]
