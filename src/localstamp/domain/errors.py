"""Errors raised by the domain and its settings, mapped to exit codes by the CLI."""

from __future__ import annotations


class ConfigurationError(Exception):
    """A ``[localstamp]`` or ``[lib_log_rich]`` section that cannot be used.

    Example:
        >>> str(ConfigurationError("[localstamp] must be a table, got str"))
        '[localstamp] must be a table, got str'
    """


class InvalidOffsetError(ValueError):
    """An offset that is not a whole number of minutes, or spans a full day or more."""


class InvalidInstantError(ValueError):
    """Text that ``--at`` cannot read as an ISO 8601 instant.

    Example:
        >>> isinstance(InvalidInstantError("invalid ISO 8601 instant: 'yesterday'"), ValueError)
        True
    """


__all__ = ["ConfigurationError", "InvalidInstantError", "InvalidOffsetError"]
