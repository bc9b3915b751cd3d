"""Service layer: the in-memory facility registry and its admin gate.

Mutations return tagged `Ok` / `Err` results instead of raising, and either
commit fully or not at all. Reads never fail; unknown ids come back as
`None` or `False`.
"""

import logging
import threading

from facility_registry.clock import BlockHeightClock, ClockProvider
from facility_registry.config import get_settings
from facility_registry.events import FacilityEventBroadcaster
from facility_registry.models.facility import Facility
from facility_registry.schemas.results import Err, Ok, RegistryError, Result

logger = logging.getLogger(__name__)


class FacilityRegistry:
    def __init__(
        self,
        admin: str | None = None,
        clock: ClockProvider | None = None,
        broadcaster: FacilityEventBroadcaster | None = None,
    ) -> None:
        self._lock = threading.RLock()
        self._facilities: dict[str, Facility] = {}
        self._admin = admin if admin is not None else get_settings().REGISTRY_ADMIN
        self._clock = clock if clock is not None else BlockHeightClock()
        self._broadcaster = broadcaster if broadcaster is not None else FacilityEventBroadcaster()

    # ── Read-only state ─────────────────────────────

    @property
    def admin(self) -> str:
        with self._lock:
            return self._admin

    @property
    def block_height(self) -> int:
        return self._clock.height

    @property
    def broadcaster(self) -> FacilityEventBroadcaster:
        return self._broadcaster

    def __len__(self) -> int:
        with self._lock:
            return len(self._facilities)

    def __contains__(self, facility_id: object) -> bool:
        with self._lock:
            return facility_id in self._facilities

    # ── Mutations ───────────────────────────────────

    def register(
        self,
        caller: str,
        facility_id: str,
        name: str,
        location: str,
        industry_type: str,
    ) -> Result:
        """Record a new unverified facility owned by `caller`."""
        with self._lock:
            if facility_id in self._facilities:
                logger.warning("Register rejected: facility %s already exists", facility_id)
                return Err(value=RegistryError.DUPLICATE_FACILITY)

            self._facilities[facility_id] = Facility(
                owner=caller,
                name=name,
                location=location,
                industry_type=industry_type,
                verified=False,
                registration_date=self._clock.height,
                verification_date=None,
            )
            logger.info(
                "Registered facility %s (%s) for %s at height %d",
                facility_id, name, caller, self._clock.height,
            )
        self._broadcaster.broadcast_update(facility_id)
        return Ok()

    def verify(self, caller: str, facility_id: str) -> Result:
        """
        Mark a facility verified and stamp the current block height.

        Authorization is checked before existence, so a non-admin caller
        learns nothing about which ids are registered. Verifying again
        re-stamps `verification_date`.
        """
        with self._lock:
            if caller != self._admin:
                logger.warning("Verify rejected: %s is not the admin", caller)
                return Err(value=RegistryError.UNAUTHORIZED)

            facility = self._facilities.get(facility_id)
            if facility is None:
                logger.warning("Verify rejected: facility %s not found", facility_id)
                return Err(value=RegistryError.FACILITY_NOT_FOUND)

            height = self._clock.height
            self._facilities[facility_id] = facility.model_copy(
                update={"verified": True, "verification_date": height}
            )
            logger.info("Verified facility %s at height %d", facility_id, height)
        self._broadcaster.broadcast_update(facility_id)
        return Ok()

    def set_admin(self, caller: str, new_admin: str) -> Result:
        """Hand admin rights to `new_admin`. Only the current admin may call this."""
        with self._lock:
            if caller != self._admin:
                logger.warning("Admin transfer rejected: %s is not the admin", caller)
                return Err(value=RegistryError.UNAUTHORIZED)

            self._admin = new_admin
            logger.info("Admin transferred from %s to %s", caller, new_admin)
        return Ok()

    # ── Reads ───────────────────────────────────────

    def get_facility(self, facility_id: str) -> Facility | None:
        """Return a copy of the stored record, or None if unknown."""
        with self._lock:
            facility = self._facilities.get(facility_id)
            return facility.model_copy() if facility is not None else None

    def is_facility_verified(self, facility_id: str) -> bool:
        with self._lock:
            facility = self._facilities.get(facility_id)
            return facility.verified if facility is not None else False

    def list_facilities(self) -> list[tuple[str, Facility]]:
        """All facilities as (id, record copy) pairs, ordered by name."""
        with self._lock:
            items = [(fid, f.model_copy()) for fid, f in self._facilities.items()]
        return sorted(items, key=lambda item: (item[1].name, item[0]))
