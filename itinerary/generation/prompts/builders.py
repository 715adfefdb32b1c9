"""
Prompt builders for itinerary generation.

Pure functions of a validated ``TripRequest`` and a language tag.
"""

from itinerary.shared.contracts import TripRequest
from itinerary.generation.prompts.templates import (
    GENERIC_LANGUAGE_INSTRUCTION,
    ITINERARY_PROMPT_TEMPLATE,
    JSON_EXAMPLE,
    LANGUAGE_INSTRUCTIONS,
    MIN_ACTIVITIES_PER_DAY,
    RECOMMENDATION_MINIMUMS,
)


def build_language_instruction(language: str) -> str:
    """
    Return the language constraint line for a BCP 47 style tag.

    Known primary subtags ("th", "en") use a fixed sentence; anything else
    names the tag explicitly.
    """
    primary = language.strip().lower().split("-")[0].split("_")[0]
    if primary in LANGUAGE_INSTRUCTIONS:
        return LANGUAGE_INSTRUCTIONS[primary]
    return GENERIC_LANGUAGE_INSTRUCTION.format(language=language.strip())


def build_itinerary_prompt(request: TripRequest, language: str) -> str:
    """
    Build the instruction string sent to every model in the cascade.

    Args:
        request: Validated trip request
        language: Target language tag for all generated text

    Returns:
        Prompt containing the language constraint, destination and duration,
        structural minimums and an example of the JSON shape.
    """
    return ITINERARY_PROMPT_TEMPLATE.format(
        language_instruction=build_language_instruction(language),
        destination=request.destination,
        duration=request.duration,
        day_word="day" if request.duration == 1 else "days",
        min_activities=MIN_ACTIVITIES_PER_DAY,
        total_recommendations=sum(RECOMMENDATION_MINIMUMS.values()),
        min_place=RECOMMENDATION_MINIMUMS["place"],
        min_restaurant=RECOMMENDATION_MINIMUMS["restaurant"],
        min_experience=RECOMMENDATION_MINIMUMS["experience"],
        json_example=JSON_EXAMPLE,
    )
