"""
Cascade state schema.

Carries the trip request, the prompt and the cascade position through
the graph. ``result`` and ``error`` are mutually exclusive at the end.
"""

from typing import Optional, Tuple, TypedDict

from itinerary.shared.contracts import GenerationResult, TripRequest
from itinerary.generation.errors import ClassifiedError


class CascadeState(TypedDict):
    """State schema for the cascade graph."""

    # Input
    request: TripRequest
    language: str
    models: Tuple[str, ...]

    # Populated by build_prompt
    prompt: str

    # Cascade position
    model_index: int
    attempt_count: int

    # Outcome
    result: Optional[GenerationResult]
    error: Optional[ClassifiedError]
    fatal: bool

    # Final status: "running", then "success", "aborted" or "exhausted"
    status: str

    # Request tracking
    request_id: Optional[str]
