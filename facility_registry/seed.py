"""
Seed script: populates a fresh registry with demo facilities.

3 facilities registered by their operators a few blocks apart,
then verified by the configured admin.

Usage:
    python -m facility_registry.seed
"""

import logging

from facility_registry.clock import BlockHeightClock
from facility_registry.config import get_settings
from facility_registry.services.registry import FacilityRegistry

logger = logging.getLogger(__name__)

# ──────────────────────────────────────────────
# Fixed facility definitions
# ──────────────────────────────────────────────

FACILITIES = [
    {
        "id": "power-station-alpha",
        "owner": "ST2CY5V39NHDPWSXMW9QDT3HC3GD6Q6XX4CFRK9AG",
        "name": "Power Station Alpha",
        "location": "Houston, TX",
        "industry_type": "power_station",
    },
    {
        "id": "chemical-plant-beta",
        "owner": "ST3CECAKJ4BH08JYY7W53MC81BYDT4YDA5Z7GZLE2",
        "name": "Chemical Plant Beta",
        "location": "Rotterdam, NL",
        "industry_type": "chemical_plant",
    },
    {
        "id": "manufacturing-gamma",
        "owner": "ST2CY5V39NHDPWSXMW9QDT3HC3GD6Q6XX4CFRK9AG",
        "name": "Manufacturing Gamma",
        "location": "São Paulo, BR",
        "industry_type": "manufacturing",
    },
]

# Blocks between consecutive registrations
BLOCKS_BETWEEN_REGISTRATIONS = 5


def seed_registry(registry: FacilityRegistry, clock: BlockHeightClock) -> list[str]:
    """Register and verify every demo facility. Returns the seeded ids."""
    seeded = []
    for fac in FACILITIES:
        result = registry.register(
            fac["owner"], fac["id"], fac["name"], fac["location"], fac["industry_type"]
        )
        if result.is_err:
            logger.warning("Skipping %s: %s", fac["id"], result.value.name)
            continue
        seeded.append(fac["id"])
        clock.advance(BLOCKS_BETWEEN_REGISTRATIONS)

    for facility_id in seeded:
        result = registry.verify(registry.admin, facility_id)
        if result.is_err:
            logger.warning("Could not verify %s: %s", facility_id, result.value.name)

    return seeded


def main():
    settings = get_settings()
    logging.basicConfig(level=settings.LOG_LEVEL)

    clock = BlockHeightClock()
    registry = FacilityRegistry(clock=clock)
    seeded = seed_registry(registry, clock)

    print(f"{settings.APP_NAME}: seeded {len(seeded)} facilities (height {clock.height})")
    for facility_id, facility in registry.list_facilities():
        print(
            f"  {facility_id}: {facility.name} @ {facility.location} "
            f"registered={facility.registration_date} verified={facility.verification_date}"
        )


if __name__ == "__main__":
    main()
