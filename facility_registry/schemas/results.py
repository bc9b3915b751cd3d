"""Tagged results returned by the registry's mutating operations."""

from enum import IntEnum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class RegistryError(IntEnum):
    DUPLICATE_FACILITY = 1
    FACILITY_NOT_FOUND = 2
    UNAUTHORIZED = 3


# ── Result variants ─────────────────────────────────


class Ok(BaseModel):
    """Successful mutation; carries a boolean acknowledgment only."""
    type: Literal["ok"] = "ok"
    value: Literal[True] = True

    @property
    def is_ok(self) -> bool:
        return True

    @property
    def is_err(self) -> bool:
        return False


class Err(BaseModel):
    """Rejected mutation; carries exactly one error code."""
    type: Literal["err"] = "err"
    value: RegistryError

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def is_err(self) -> bool:
        return True


Result = Annotated[Union[Ok, Err], Field(discriminator="type")]
