"""Logical clock (block height) read by the registry when stamping records."""

import logging
from typing import Protocol

from facility_registry.config import get_settings

logger = logging.getLogger(__name__)


class ClockProvider(Protocol):
    """Anything exposing the current block height."""

    @property
    def height(self) -> int: ...


class BlockHeightClock:
    """Monotonically non-decreasing block height, advanced by the host."""

    def __init__(self, height: int | None = None):
        if height is None:
            height = get_settings().INITIAL_BLOCK_HEIGHT
        if height < 0:
            raise ValueError(f"block height must be >= 0, got {height}")
        self._height = int(height)

    @property
    def height(self) -> int:
        return self._height

    def advance(self, blocks: int = 1) -> int:
        """Move the clock forward by `blocks` and return the new height."""
        if blocks < 0:
            raise ValueError(f"cannot advance clock by a negative amount ({blocks})")
        self._height += int(blocks)
        logger.debug("Clock advanced by %d to height %d", blocks, self._height)
        return self._height

    def __repr__(self) -> str:
        return f"<BlockHeightClock height={self._height}>"
