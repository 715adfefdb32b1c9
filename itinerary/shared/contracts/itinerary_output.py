"""
Itinerary output contract.

Defines the structured itinerary returned to callers once a model's
output has been parsed and validated. JSON field names are camelCase;
Python attributes are snake_case.
"""

from datetime import datetime, timezone
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"

RecommendationCategory = Literal["place", "restaurant", "experience"]


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Activity(_CamelModel):
    """A single scheduled activity within a day."""

    time: str = Field(pattern=TIME_PATTERN, description="Start time (HH:mm)")
    name: str = Field(description="Activity name")
    location: str = Field(description="Where the activity takes place")
    description: str = Field(description="Activity description")


class DailySchedule(_CamelModel):
    """One day of the itinerary."""

    day: int = Field(ge=1, strict=True, description="Day number (1-indexed)")
    activities: List[Activity] = Field(
        min_length=3, description="Activities for the day, ordered by time"
    )


class Recommendation(_CamelModel):
    """A place, restaurant or experience not tied to a specific day."""

    category: RecommendationCategory
    name: str
    description: str
    location: Optional[str] = None


class ItineraryPayload(_CamelModel):
    """The shape a model is asked to produce."""

    daily_schedules: List[DailySchedule]
    recommendations: List[Recommendation]


class GenerationResult(_CamelModel):
    """
    Contract for a successfully generated itinerary.

    Built in one step after validation; callers never see a partial
    result.
    """

    destination: str
    duration: int = Field(ge=1)
    daily_schedules: List[DailySchedule]
    recommendations: List[Recommendation]
    generated_by: Optional[str] = Field(
        default=None, description="Model id that produced the itinerary"
    )
    generated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "destination": "Chiang Mai",
                "duration": 1,
                "dailySchedules": [
                    {
                        "day": 1,
                        "activities": [
                            {
                                "time": "09:00",
                                "name": "Wat Phra That Doi Suthep",
                                "location": "Doi Suthep",
                                "description": "Hilltop temple with city views",
                            },
                            {
                                "time": "13:00",
                                "name": "Khao soi lunch",
                                "location": "Old City",
                                "description": "Northern curry noodles",
                            },
                            {
                                "time": "18:00",
                                "name": "Night Bazaar",
                                "location": "Chang Khlan Road",
                                "description": "Evening market",
                            },
                        ],
                    }
                ],
                "recommendations": [
                    {
                        "category": "restaurant",
                        "name": "Khao Soi Khun Yai",
                        "description": "Local favourite",
                    }
                ],
                "generatedBy": "gemini-2.5-flash",
            }
        },
    )
