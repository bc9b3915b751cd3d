"""Pydantic model for a registered facility record."""

from pydantic import BaseModel, Field, model_validator


class Facility(BaseModel):
    owner: str = Field(description="Principal that registered the facility")
    name: str
    location: str
    industry_type: str
    verified: bool = False
    registration_date: int = Field(description="Block height at registration")
    verification_date: int | None = Field(
        default=None, description="Block height at the latest verification"
    )

    @model_validator(mode="after")
    def check_verification_stamp(self) -> "Facility":
        # verification_date is present exactly when verified is set
        if self.verified != (self.verification_date is not None):
            raise ValueError("verification_date must be set if and only if verified is true")
        if self.verification_date is not None and self.verification_date < self.registration_date:
            raise ValueError("verification_date cannot precede registration_date")
        return self

    def __repr__(self) -> str:
        state = "verified" if self.verified else "registered"
        return f"<Facility {self.name} ({self.industry_type}) {state}>"
