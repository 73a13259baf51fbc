"""Ports the composition root fills: clock, config loading, config display, logging."""

from __future__ import annotations

from .ports import DisplayConfig, GetConfig, InitLogging, ReadClock

__all__ = ["DisplayConfig", "GetConfig", "InitLogging", "ReadClock"]
