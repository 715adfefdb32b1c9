"""
FastAPI endpoints for itinerary generation.

Exposes the cascade orchestrator over HTTP. Authentication and
persistence are handled by other services.
"""

import logging
import uuid
from typing import Any, Optional

from fastapi import APIRouter, Depends, HTTPException, Request, status
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from itinerary.shared.contracts import GenerationResult
from itinerary.generation.errors import ErrorKind, GenerationFailed
from itinerary.generation.orchestrator import CascadeOrchestrator


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/itinerary", tags=["itinerary"])

STATUS_BY_KIND = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.RATE_LIMIT: status.HTTP_429_TOO_MANY_REQUESTS,
    ErrorKind.TIMEOUT: status.HTTP_504_GATEWAY_TIMEOUT,
}


# ============================================================================
# Request/Response Models
# ============================================================================


class ItineraryRequest(BaseModel):
    """Request to generate an itinerary."""

    # Checked by TripRequest so malformed input is reported as a validation error
    destination: Any = Field(default=None, description="Trip destination")
    duration: Any = Field(default=None, description="Trip length in days")
    language: Optional[str] = Field(
        default=None, description="Language tag for generated text"
    )


class ItineraryResponse(BaseModel):
    """Successful generation response."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    success: bool = True
    request_id: str
    itinerary: GenerationResult


# ============================================================================
# Dependencies
# ============================================================================


def get_orchestrator(request: Request) -> CascadeOrchestrator:
    """Return the orchestrator attached to the application."""
    return request.app.state.orchestrator


# ============================================================================
# Endpoints
# ============================================================================


@router.post(
    "",
    response_model=ItineraryResponse,
    response_model_by_alias=True,
    status_code=status.HTTP_201_CREATED,
)
async def generate_itinerary(
    body: ItineraryRequest,
    orchestrator: CascadeOrchestrator = Depends(get_orchestrator),
):
    """
    Generate an itinerary for a destination and trip length.

    Failures are reported with the classified error kind and a
    user-facing message.
    """
    request_id = str(uuid.uuid4())
    _log = f"[request={request_id}] [api=generate_itinerary] "
    logger.info(
        f"{_log}Generation requested | destination={body.destination}, "
        f"duration={body.duration}, language={body.language}"
    )

    try:
        itinerary = await orchestrator.generate(
            {"destination": body.destination, "duration": body.duration},
            language=body.language,
            request_id=request_id,
        )
    except GenerationFailed as e:
        error = e.error
        logger.warning(
            f"{_log}Generation failed | kind={error.kind.value}, "
            f"model={error.underlying_model}, attempts={error.attempt_count}: "
            f"{error.message}"
        )
        # Provider error text stays in the logs
        if error.kind is ErrorKind.VALIDATION:
            message = error.message
        else:
            message = error.user_message
        raise HTTPException(
            status_code=STATUS_BY_KIND.get(error.kind, status.HTTP_502_BAD_GATEWAY),
            detail={"kind": error.kind.value, "message": message},
        )

    logger.info(
        f"{_log}Generation succeeded | model={itinerary.generated_by}, "
        f"days={len(itinerary.daily_schedules)}"
    )
    return ItineraryResponse(request_id=request_id, itinerary=itinerary)
