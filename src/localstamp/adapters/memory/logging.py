"""Logging stand-in: lib_log_rich is never started."""

from __future__ import annotations

from lib_layered_config import Config


def init_logging_in_memory(config: Config) -> None:
    """Leave logging untouched; commands then skip their log scopes."""


__all__ = ["init_logging_in_memory"]
