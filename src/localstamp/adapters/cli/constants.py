"""Click settings and traceback character limits used by the localstamp CLI."""

from __future__ import annotations

from typing import Final

HELP_SETTINGS: Final[dict[str, list[str]]] = {"help_option_names": ["-h", "--help"]}

#: Characters of the rendered error kept, keyed by whether ``--traceback`` is on.
TRACEBACK_LIMITS: Final[dict[bool, int]] = {False: 500, True: 10_000}

__all__ = ["HELP_SETTINGS", "TRACEBACK_LIMITS"]
