"""
Schema validation and normalization of parsed model output.

Checks the parsed payload against the itinerary contract and the
requested duration, then orders each day's activities by start time.
"""

from typing import Any, Optional

from pydantic import ValidationError

from itinerary.shared.contracts import (
    DailySchedule,
    GenerationResult,
    ItineraryPayload,
    TripRequest,
)
from itinerary.generation.errors import SchemaMismatchError


def _check_top_level(payload: Any) -> None:
    if not isinstance(payload, dict):
        raise SchemaMismatchError(
            f"Expected a JSON object, got {type(payload).__name__}"
        )
    for key in ("dailySchedules", "recommendations"):
        if not isinstance(payload.get(key), list):
            raise SchemaMismatchError(f"Missing or non-list '{key}'")


def _format_validation_error(error: ValidationError) -> str:
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"])
    return f"{error.error_count()} schema error(s); first at {location}: {first['msg']}"


def sort_activities(schedule: DailySchedule) -> DailySchedule:
    """Return the schedule with activities in ascending ``HH:mm`` order."""
    ordered = sorted(schedule.activities, key=lambda activity: activity.time)
    return schedule.model_copy(update={"activities": ordered})


def validate_itinerary(
    payload: Any,
    request: TripRequest,
    generated_by: Optional[str] = None,
) -> GenerationResult:
    """
    Validate a parsed model payload and build the generation result.

    Args:
        payload: Parsed JSON value from the response parser
        request: The trip request the payload was generated for
        generated_by: Model id that produced the payload

    Returns:
        GenerationResult with activities sorted by time within each day

    Raises:
        SchemaMismatchError: If the payload violates the contract or the
            number of daily schedules differs from the requested duration, or a
            schedule's day number is not its 1-based position
    """
    _check_top_level(payload)

    try:
        parsed = ItineraryPayload.model_validate(payload)
    except ValidationError as e:
        raise SchemaMismatchError(_format_validation_error(e)) from e

    if len(parsed.daily_schedules) != request.duration:
        raise SchemaMismatchError(
            f"Expected {request.duration} days but got {len(parsed.daily_schedules)}"
        )

    for position, schedule in enumerate(parsed.daily_schedules, start=1):
        if schedule.day != position:
            raise SchemaMismatchError(
                f"Schedule {position} is numbered day {schedule.day}"
            )

    return GenerationResult(
        destination=request.destination,
        duration=request.duration,
        daily_schedules=[sort_activities(s) for s in parsed.daily_schedules],
        recommendations=parsed.recommendations,
        generated_by=generated_by,
    )
