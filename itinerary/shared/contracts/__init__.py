"""Contracts exchanged between the generation core and its callers."""

from itinerary.shared.contracts.trip_request import TripRequest
from itinerary.shared.contracts.itinerary_output import (
    Activity,
    DailySchedule,
    Recommendation,
    ItineraryPayload,
    GenerationResult,
)

__all__ = [
    "TripRequest",
    "Activity",
    "DailySchedule",
    "Recommendation",
    "ItineraryPayload",
    "GenerationResult",
]
