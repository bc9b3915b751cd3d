from __future__ import annotations

import pytest
from pydantic import ValidationError

from facility_registry.clock import BlockHeightClock
from facility_registry.config import get_settings
from facility_registry.services.registry import FacilityRegistry


def test_clock_advances_monotonically() -> None:
    clock = BlockHeightClock(100)

    assert clock.advance(5) == 105
    assert clock.advance() == 106
    assert clock.advance(0) == 106
    assert clock.height == 106


def test_clock_rejects_negative_advance() -> None:
    clock = BlockHeightClock(100)

    with pytest.raises(ValueError):
        clock.advance(-1)
    assert clock.height == 100


def test_clock_rejects_negative_start() -> None:
    with pytest.raises(ValueError):
        BlockHeightClock(-3)


def test_default_admin_and_height() -> None:
    settings = get_settings()

    assert settings.REGISTRY_ADMIN == "ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM"
    assert settings.INITIAL_BLOCK_HEIGHT == 100
    assert BlockHeightClock().height == 100


def test_environment_overrides_admin_and_height(monkeypatch) -> None:
    monkeypatch.setenv("FACILITY_REGISTRY_ADMIN", "ST-CONFIGURED-ADMIN")
    monkeypatch.setenv("FACILITY_INITIAL_BLOCK_HEIGHT", "42")
    get_settings.cache_clear()

    registry = FacilityRegistry()

    assert registry.admin == "ST-CONFIGURED-ADMIN"
    assert registry.block_height == 42


def test_explicit_admin_wins_over_settings(monkeypatch) -> None:
    monkeypatch.setenv("FACILITY_REGISTRY_ADMIN", "ST-CONFIGURED-ADMIN")
    get_settings.cache_clear()

    assert FacilityRegistry(admin="ST-EXPLICIT").admin == "ST-EXPLICIT"


def test_negative_initial_height_is_rejected(monkeypatch) -> None:
    monkeypatch.setenv("FACILITY_INITIAL_BLOCK_HEIGHT", "-1")
    get_settings.cache_clear()

    with pytest.raises(ValidationError):
        get_settings()
