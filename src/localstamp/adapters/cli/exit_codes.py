"""Exit codes returned by ``localstamp``."""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Process exit codes, following errno and sysexits.h where one fits.

    ``INVALID_ARGUMENT`` (EINVAL) covers a bad ``--at``, a bad ``--offset``
    and an unknown ``config --section``. ``CONFIG_ERROR`` (EX_CONFIG) covers
    an invalid ``[localstamp]`` or ``[lib_log_rich]`` section. The 128+N
    signal codes are produced by ``lib_cli_exit_tools``; localstamp never
    raises them itself.

    Example:
        >>> int(ExitCode.CONFIG_ERROR)
        78
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    INVALID_ARGUMENT = 22
    CONFIG_ERROR = 78
    SIGNAL_INT = 130
    BROKEN_PIPE = 141
    SIGNAL_TERM = 143


__all__ = ["ExitCode"]
