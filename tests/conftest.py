"""Shared pytest fixtures for domain, adapter and CLI tests.

Fixtures use descriptive names that read as plain English and replace only
the I/O boundaries (clock, config loading, logging), never the domain code.
"""

from __future__ import annotations

import os
import re
import time
from collections.abc import Callable, Iterator
from dataclasses import fields
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

if TYPE_CHECKING:
    from localstamp.adapters.memory.clock import FixedClock
    from localstamp.composition import AppServices

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _remove_ansi_codes(text: str) -> str:
    """Return *text* stripped of ANSI escape sequences."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` when the exact printed value matters so log lines
    on stderr never leak into the comparison.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory (real clock, config, logging)."""
    from localstamp.composition import build_production

    return build_production


@pytest.fixture
def fixed_clock() -> FixedClock:
    """Provide a FixedClock at 2023-01-01T00:30:00Z with a +09:00 offset."""
    from localstamp.adapters.memory import FixedClock

    return FixedClock()


@pytest.fixture
def testing_factory(fixed_clock: FixedClock) -> Callable[[], AppServices]:
    """Provide in-memory services sharing the ``fixed_clock`` fixture.

    Example:
        def test_now(cli_runner, testing_factory, fixed_clock) -> None:
            result = cli_runner.invoke(cli, ["now"], obj=testing_factory)
            assert fixed_clock.calls == [None]
    """
    from localstamp.composition import build_testing

    services = build_testing(clock=fixed_clock)
    return lambda: services


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""
    return _remove_ansi_codes


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config lru_cache before and after the test.

    Environment overrides set during a test must not leak into later tests
    through the cached Config.
    """
    from localstamp.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    try:
        yield
    finally:
        config_mod.get_config.cache_clear()


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts without filesystem I/O."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def config_cli_context(
    clear_config_cache: None,
    fixed_clock: FixedClock,
) -> Callable[[dict[str, Any]], Callable[[], AppServices]]:
    """Create a services factory whose configuration is the given dict.

    The clock is the ``fixed_clock`` fixture and configuration display is the
    production Rich renderer, so ``config`` output can be asserted on.

    Example:
        def test_offset_from_config(cli_runner, config_cli_context) -> None:
            factory = config_cli_context({"localstamp": {"offset_minutes": -300}})
            result = cli_runner.invoke(cli, ["now"], obj=factory)
            assert result.stdout == "2022-12-31 19:30:00\\n"
    """
    from localstamp.adapters.memory import init_logging_in_memory
    from localstamp.composition import AppServices, build_production

    def _create(config_data: dict[str, Any]) -> Callable[[], AppServices]:
        config = Config(config_data, {})
        prod = build_production()

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        test_services = AppServices(
            read_clock=fixed_clock,
            get_config=_fake_get_config,
            display_config=prod.display_config,
            init_logging=init_logging_in_memory,
        )
        return lambda: test_services

    return _create


@pytest.fixture
def local_timezone() -> Iterator[Callable[[str], None]]:
    """Switch the process time zone via ``TZ`` and restore it afterwards.

    Requires ``time.tzset``, which only exists on POSIX platforms.

    Example:
        def test_tokyo(local_timezone) -> None:
            local_timezone("Asia/Tokyo")
    """
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")

    original = os.environ.get("TZ")

    def _switch(name: str) -> None:
        os.environ["TZ"] = name
        time.tzset()

    try:
        yield _switch
    finally:
        if original is None:
            os.environ.pop("TZ", None)
        else:
            os.environ["TZ"] = original
        time.tzset()
