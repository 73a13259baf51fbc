"""Port behavioural contracts for in-memory adapters and the composition root.

Production adapters are covered through the CLI integration tests. Static
conformance to the Protocols is enforced by the type checker.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from lib_layered_config import Config

from localstamp.adapters.memory import (
    FIXED_INSTANT,
    FIXED_OFFSET,
    FixedClock,
    display_config_in_memory,
    get_config_in_memory,
    init_logging_in_memory,
    read_clock_in_memory,
)
from localstamp.composition import AppServices, build_production, build_testing
from localstamp.domain.behaviors import ClockReading

UTC = timezone.utc


@pytest.mark.os_agnostic
def test_read_clock_in_memory_returns_reference_reading() -> None:
    """Without an instant the reference reading comes back."""
    reading = read_clock_in_memory()

    assert reading == ClockReading(instant=FIXED_INSTANT, offset=FIXED_OFFSET)


@pytest.mark.os_agnostic
def test_read_clock_in_memory_keeps_requested_instant() -> None:
    """A requested instant is echoed with the fixed offset."""
    instant = datetime(2024, 2, 29, 12, tzinfo=UTC)

    assert read_clock_in_memory(instant).instant == instant


@pytest.mark.os_agnostic
def test_fixed_clock_records_every_call() -> None:
    """FixedClock keeps what it was asked, in order."""
    clock = FixedClock(offset=timedelta(minutes=-300))
    instant = datetime(2023, 1, 1, 23, 30, tzinfo=UTC)

    clock()
    reading = clock(instant)

    assert clock.calls == [None, instant]
    assert reading.format() == "2023-01-01 18:30:00"


@pytest.mark.os_agnostic
def test_get_config_in_memory_returns_empty_config() -> None:
    """In-memory config has no sections at all."""
    config = get_config_in_memory(profile="anything")

    assert isinstance(config, Config)
    assert config.as_dict() == {}


@pytest.mark.os_agnostic
def test_display_and_logging_in_memory_are_silent(capsys: pytest.CaptureFixture[str]) -> None:
    """Neither no-op adapter writes anything."""
    config = Config({"localstamp": {"offset_minutes": 0}}, {})

    display_config_in_memory(config, section="localstamp")
    init_logging_in_memory(config)

    assert capsys.readouterr() == ("", "")


@pytest.mark.os_agnostic
@pytest.mark.parametrize("factory", [build_production, build_testing])
def test_every_service_is_callable(factory: object) -> None:
    """Both wirings fill every AppServices slot with a callable."""
    services = factory()  # type: ignore[operator]

    assert isinstance(services, AppServices)
    for name in ("read_clock", "get_config", "display_config", "init_logging"):
        assert callable(getattr(services, name))


@pytest.mark.os_agnostic
def test_build_testing_uses_given_clock() -> None:
    """A supplied clock is wired through unchanged."""
    clock = FixedClock()

    assert build_testing(clock=clock).read_clock is clock


@pytest.mark.os_agnostic
def test_app_services_is_frozen() -> None:
    """The container cannot be mutated after wiring."""
    services = build_testing()

    with pytest.raises(AttributeError):
        services.read_clock = read_clock_in_memory  # type: ignore[misc]
