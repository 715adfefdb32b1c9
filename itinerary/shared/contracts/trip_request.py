"""
Trip request contract.

The validated input that enters the generation cascade.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TripRequest(BaseModel):
    """A destination plus a trip length in days."""

    model_config = ConfigDict(frozen=True)

    destination: str = Field(description="Trip destination")
    duration: int = Field(ge=1, strict=True, description="Trip length in days")

    @field_validator("destination")
    @classmethod
    def destination_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Destination is required")
        return value
