import pytest

from facility_registry.clock import BlockHeightClock
from facility_registry.config import get_settings
from facility_registry.services.registry import FacilityRegistry

from helpers import ADMIN


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def clock() -> BlockHeightClock:
    return BlockHeightClock(100)


@pytest.fixture
def registry(clock: BlockHeightClock) -> FacilityRegistry:
    return FacilityRegistry(admin=ADMIN, clock=clock)
