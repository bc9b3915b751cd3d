"""Event broadcasting for facility state changes."""

import logging
import threading
from dataclasses import dataclass, field
from typing import Dict

logger = logging.getLogger(__name__)


@dataclass
class _FacilityChannel:
    condition: threading.Condition = field(default_factory=threading.Condition)
    waiters: int = 0
    # Bumped on every broadcast so a waiter cannot miss one that lands before it parks
    generation: int = 0


class FacilityEventBroadcaster:
    """Manages event broadcasting for facility-specific registry updates."""

    def __init__(self):
        # Map of facility_id -> channel, kept only while someone is waiting on it
        self._channels: Dict[str, _FacilityChannel] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._channels)

    def waiting(self, facility_id: str) -> int:
        """Number of callers currently blocked on a facility."""
        with self._lock:
            channel = self._channels.get(facility_id)
            return channel.waiters if channel is not None else 0

    def _join(self, facility_id: str) -> tuple[_FacilityChannel, int]:
        with self._lock:
            channel = self._channels.get(facility_id)
            if channel is None:
                channel = self._channels[facility_id] = _FacilityChannel()
            channel.waiters += 1
            return channel, channel.generation

    def _leave(self, facility_id: str, channel: _FacilityChannel) -> None:
        with self._lock:
            channel.waiters -= 1
            if channel.waiters == 0 and self._channels.get(facility_id) is channel:
                del self._channels[facility_id]

    def broadcast_update(self, facility_id: str) -> None:
        """Notify all waiters that the facility record has changed."""
        with self._lock:
            channel = self._channels.get(facility_id)
            if channel is None:
                return
            channel.generation += 1
        with channel.condition:
            channel.condition.notify_all()
        logger.debug("Broadcast update for facility %s", facility_id)

    def wait_for_update(self, facility_id: str, timeout: float = 15.0) -> bool:
        """
        Block until the next update for a facility.

        Returns:
            True if update event received, False if timeout occurred
        """
        channel, generation = self._join(facility_id)
        try:
            with channel.condition:
                return channel.condition.wait_for(
                    lambda: channel.generation != generation, timeout=timeout
                )
        finally:
            self._leave(facility_id, channel)
