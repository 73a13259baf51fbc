"""Output formats shared by ``now --format`` and ``config --format``."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """``human`` prints the bare timestamp (or TOML-like config); ``json`` prints JSON.

    Being a ``str`` lets Click choices and plain strings compare equal.

    Example:
        >>> OutputFormat("json") is OutputFormat.JSON
        True
    """

    HUMAN = "human"
    JSON = "json"


__all__ = ["OutputFormat"]
