"""
Cascade orchestrator.

Entry point for turning a trip request into a validated itinerary. The
client, model list and retry policy are fixed at construction; each call
runs the cascade graph once and yields either a result or one
classified error.
"""

import asyncio
import logging
import uuid
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError

from itinerary.shared.contracts import GenerationResult, TripRequest
from itinerary.shared.llm import ModelClient
from itinerary.generation.attempts import ModelAttemptRunner, Sleep
from itinerary.generation.classifier import ErrorClassifier
from itinerary.generation.config import CascadeConfig, DEFAULT_CONFIG
from itinerary.generation.errors import (
    ClassifiedError,
    ErrorKind,
    GenerationFailed,
)
from itinerary.generation.graph import create_cascade_graph


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationOutcome:
    """Exactly one of ``result`` or ``error`` is set."""

    result: Optional[GenerationResult] = None
    error: Optional[ClassifiedError] = None

    @property
    def ok(self) -> bool:
        return self.result is not None


class CascadeOrchestrator:
    """
    Generates itineraries by walking a prioritized model list.

    Args:
        client: Fully configured model client
        config: Model list, retry count, backoff base and deadline
        classifier: Failure classifier; defaults to ``ErrorClassifier()``
        sleep: Awaitable sleep used for backoff between retries
    """

    def __init__(
        self,
        client: ModelClient,
        config: CascadeConfig = DEFAULT_CONFIG,
        classifier: Optional[ErrorClassifier] = None,
        sleep: Sleep = asyncio.sleep,
    ):
        self.config = config
        self.classifier = classifier or ErrorClassifier()
        self._runner = ModelAttemptRunner(client, config, self.classifier, sleep)
        self._graph = create_cascade_graph(self._runner)

    async def run(
        self,
        request: Union[TripRequest, Mapping[str, Any]],
        language: Optional[str] = None,
        request_id: Optional[str] = None,
    ) -> GenerationOutcome:
        """
        Run the cascade once.

        Invalid requests are rejected before any model call with a
        ``validation`` error. Generation failures are returned, not raised.
        """
        request_id = request_id or uuid.uuid4().hex[:12]
        language = language or self.config.default_language
        _log = f"[request={request_id}] [graph=cascade] "

        try:
            if isinstance(request, TripRequest):
                request = request.model_dump()
            trip = TripRequest.model_validate(request)
        except ValidationError as e:
            first = e.errors()[0]
            message = first["msg"].removeprefix("Value error, ")
            logger.info(f"{_log}Rejected invalid request: {message}")
            return GenerationOutcome(
                error=ClassifiedError(
                    kind=ErrorKind.VALIDATION, message=message, attempt_count=0
                )
            )

        logger.info(
            f"{_log}Cascade starting | destination={trip.destination}, "
            f"duration={trip.duration}d, models={len(self.config.models)}"
        )

        initial_state = {
            "request": trip,
            "language": language,
            "models": self.config.models,
            "prompt": "",
            "model_index": 0,
            "attempt_count": 0,
            "result": None,
            "error": None,
            "fatal": False,
            "status": "running",
            "request_id": request_id,
        }
        final_state = await self._graph.ainvoke(
            initial_state, config={"recursion_limit": self.config.recursion_limit}
        )

        logger.info(
            f"{_log}Cascade finished | status={final_state['status']}, "
            f"attempts={final_state['attempt_count']}"
        )

        if final_state.get("result") is not None:
            return GenerationOutcome(result=final_state["result"])

        error = final_state.get("error") or ClassifiedError(
            kind=ErrorKind.UNKNOWN,
            message="All models failed",
            attempt_count=final_state["attempt_count"],
        )
        return GenerationOutcome(error=error)

    async def generate(
        self,
        request: Union[TripRequest, Mapping[str, Any]],
        language: Optional[str] = None,
        request_id: Optional[str] = None,
    ) -> GenerationResult:
        """
        Generate an itinerary.

        Returns:
            The validated, time-sorted itinerary

        Raises:
            GenerationFailed: Carrying the ``ClassifiedError`` when the cascade
                cannot produce a result
        """
        outcome = await self.run(request, language=language, request_id=request_id)
        if outcome.error is not None:
            raise GenerationFailed(outcome.error)
        return outcome.result
