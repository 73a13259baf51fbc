"""Subcommands of the ``localstamp`` group: ``now``, ``info`` and ``config``."""

from __future__ import annotations

from .config import cli_config
from .info import cli_info
from .now import cli_now

__all__ = ["cli_config", "cli_info", "cli_now"]
