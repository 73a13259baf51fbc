"""Adapters: host clock, layered config, lib_log_rich, rich-click, and in-memory stand-ins."""

from __future__ import annotations

__all__: list[str] = []
