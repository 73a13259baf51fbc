"""Logging adapter: lib_log_rich runtime started from configuration."""

from __future__ import annotations

from .setup import LogSettings, init_logging, load_log_settings

__all__ = ["LogSettings", "init_logging", "load_log_settings"]
