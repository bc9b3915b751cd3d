from facility_registry.services.registry import FacilityRegistry

ADMIN = "ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM"
OWNER = "ST2CY5V39NHDPWSXMW9QDT3HC3GD6Q6XX4CFRK9AG"
OTHER = "ST3CECAKJ4BH08JYY7W53MC81BYDT4YDA5Z7GZLE2"


def register_default(registry: FacilityRegistry, facility_id: str = "facility001", caller: str = OWNER):
    return registry.register(caller, facility_id, "Test Facility", "Test Location", "Manufacturing")
