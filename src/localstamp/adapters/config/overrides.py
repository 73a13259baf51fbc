"""``--set SECTION.KEY=VALUE``: one-off settings layered over the loaded config.

Only the sections localstamp reads can be targeted. Values are parsed as
JSON where possible (``540``, ``true``, ``null``) and kept as text
otherwise (``WARNING``).
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Final

import orjson
from lib_layered_config import Config

from localstamp.adapters.clock.settings import SECTION_NAME

KNOWN_SECTIONS: Final[frozenset[str]] = frozenset({SECTION_NAME, "lib_log_rich"})

OverrideValue = str | int | float | bool | None | list[Any] | dict[str, Any]


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """One ``--set`` entry: the dotted path, section first, and its value."""

    path: tuple[str, ...]
    value: OverrideValue

    @property
    def section(self) -> str:
        return self.path[0]


def parse_override(raw: str) -> ConfigOverride:
    """Parse ``SECTION.KEY[.SUBKEY...]=VALUE``; the first ``=`` ends the path.

    Raises:
        ValueError: Without ``=``, with fewer than two path parts, with an
            empty part, or for a section localstamp does not read.

    Examples:
        >>> parse_override("localstamp.offset_minutes=-300")
        ConfigOverride(path=('localstamp', 'offset_minutes'), value=-300)
        >>> parse_override("lib_log_rich.console_level=DEBUG").value
        'DEBUG'
    """
    dotted, sep, text = raw.partition("=")
    if not sep:
        raise ValueError(f"--set {raw!r}: expected SECTION.KEY=VALUE")
    path = tuple(dotted.strip().split("."))
    if len(path) < 2 or not all(path):
        raise ValueError(f"--set {raw!r}: key must look like SECTION.KEY")
    if path[0] not in KNOWN_SECTIONS:
        known = ", ".join(sorted(KNOWN_SECTIONS))
        raise ValueError(f"--set {raw!r}: unknown section {path[0]!r} (known: {known})")
    return ConfigOverride(path=path, value=coerce_value(text))


def coerce_value(text: str) -> OverrideValue:
    """Return *text* parsed as JSON, or unchanged when it is not JSON.

    Examples:
        >>> coerce_value("540"), coerce_value("false"), coerce_value("UTC")
        (540, False, 'UTC')
        >>> coerce_value("")
        ''
    """
    try:
        return orjson.loads(text)
    except ValueError:
        return text


def _as_tree(overrides: Iterable[ConfigOverride]) -> dict[str, Any]:
    tree: dict[str, Any] = {}
    for override in overrides:
        *parents, leaf = override.path
        node = tree
        for key in parents:
            node = node.setdefault(key, {})
            if not isinstance(node, dict):
                raise TypeError(f"--set {'.'.join(override.path)}: {key!r} was already set to a value")
        node[leaf] = override.value
    return tree


def apply_overrides(config: Config, raw_overrides: Iterable[str]) -> Config:
    """Return *config* with every ``--set`` string applied, last one wins.

    *config* itself comes back when there is nothing to apply.

    Raises:
        ValueError: For a malformed entry.
        TypeError: When one entry sets a value where another needs a table.

    Example:
        >>> cfg = Config({"localstamp": {}}, {})
        >>> apply_overrides(cfg, ["localstamp.offset_minutes=540"])["localstamp"]["offset_minutes"]
        540
    """
    parsed = [parse_override(raw) for raw in raw_overrides]
    if not parsed:
        return config
    return config.with_overrides(_as_tree(parsed))


__all__ = ["KNOWN_SECTIONS", "ConfigOverride", "OverrideValue", "apply_overrides", "coerce_value", "parse_override"]
