"""Static package metadata surfaced to CLI commands and documentation.

Values mirror ``pyproject.toml`` so the CLI can report them without
querying the installed distribution at runtime.
"""

from __future__ import annotations

#: Distribution name declared in ``pyproject.toml``.
name = "localstamp"
#: Human-readable summary shown in CLI help output.
title = "Print the current local date and time as YYYY-MM-DD HH:MM:SS"
#: Current release version pulled from ``pyproject.toml``.
version = "1.0.0"
#: Repository homepage presented to users.
homepage = "https://github.com/localstamp/localstamp"
#: Author attribution surfaced in CLI output.
author = "localstamp contributors"
#: Contact email surfaced in CLI output.
author_email = "localstamp@users.noreply.github.com"
#: Console-script name published by the package.
shell_command = "localstamp"

#: Vendor identifier for lib_layered_config paths (macOS/Windows).
LAYEREDCONF_VENDOR: str = "localstamp"
#: Application name for lib_layered_config paths (macOS/Windows).
LAYEREDCONF_APP: str = "localstamp"
#: Configuration slug for lib_layered_config Linux paths and environment variables.
LAYEREDCONF_SLUG: str = "localstamp"


def print_info() -> None:
    """Print the summarised metadata block used by the CLI ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for localstamp:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
