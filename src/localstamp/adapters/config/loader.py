"""Load localstamp's layered configuration through lib_layered_config.

Layers, later wins: the bundled ``defaultconfig.toml``, then the app, host
and user files, then ``.env``, then ``LOCALSTAMP___<SECTION>__<KEY>``
environment variables.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Final

from lib_layered_config import DEFAULT_MAX_PROFILE_LENGTH, Config, read_config, validate_profile_name

from localstamp import __init__conf__

DEFAULT_CONFIG_FILE: Final[Path] = Path(__file__).with_name("defaultconfig.toml")


@lru_cache(maxsize=4)
def get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Return the merged configuration, read once per (profile, start_dir).

    *profile* adds a ``profile/<name>/`` directory to every search path.
    *start_dir* seeds ``.env`` discovery and defaults to the working
    directory. ``get_config.cache_clear()`` forces a re-read.

    Raises:
        ValueError: When *profile* is empty, too long or tries to leave its
            directory (``../etc``).

    Example:
        >>> isinstance(get_config(), Config)
        True
    """
    if profile is not None:
        validate_profile_name(profile, max_length=DEFAULT_MAX_PROFILE_LENGTH)
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=DEFAULT_CONFIG_FILE,
        start_dir=start_dir,
    )


__all__ = ["DEFAULT_CONFIG_FILE", "get_config"]
