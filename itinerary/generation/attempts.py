"""
Per-model attempt runner.

One attempt is: deadline-guarded model call, response parsing, schema
validation. Attempts against a single model are retried with exponential
backoff while the classifier says the failure is transient.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional

from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from itinerary.shared.contracts import GenerationResult, TripRequest
from itinerary.shared.llm import ModelClient
from itinerary.generation.classifier import Classification, ErrorClassifier
from itinerary.generation.config import CascadeConfig
from itinerary.generation.response_parser import parse_model_response
from itinerary.generation.timeout import run_with_timeout
from itinerary.generation.validator import validate_itinerary


logger = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[None]]


@dataclass
class ModelRunOutcome:
    """What happened to one model: a result, or the last failure and its classification."""

    model_id: str
    attempts: int
    result: Optional[GenerationResult] = None
    error: Optional[Exception] = None
    classification: Optional[Classification] = None


class ModelAttemptRunner:
    """
    Runs attempts against one model at a time.

    Args:
        client: Model client used for every call
        config: Cascade configuration (retries, backoff, deadline)
        classifier: Decides which failures are retried
        sleep: Awaitable sleep used between retries
    """

    def __init__(
        self,
        client: ModelClient,
        config: CascadeConfig,
        classifier: ErrorClassifier,
        sleep: Sleep = asyncio.sleep,
    ):
        self.client = client
        self.config = config
        self.classifier = classifier
        self._sleep = sleep

    async def attempt(
        self, model_id: str, prompt: str, request: TripRequest
    ) -> GenerationResult:
        """Make one guarded call and turn its text into a validated result."""
        raw = await run_with_timeout(
            lambda: self.client.invoke(model_id, prompt),
            self.config.timeout_seconds,
        )
        payload = parse_model_response(raw)
        return validate_itinerary(payload, request, generated_by=model_id)

    def _retrying(self, log_prefix: str) -> AsyncRetrying:
        def before_sleep(retry_state: RetryCallState) -> None:
            error = retry_state.outcome.exception()
            logger.warning(
                f"{log_prefix}Attempt {retry_state.attempt_number} failed "
                f"({self.classifier.kind_of(error).value}): {error} | "
                f"retrying in {retry_state.next_action.sleep:g}s"
            )

        return AsyncRetrying(
            stop=stop_after_attempt(self.config.max_retries),
            wait=wait_exponential(
                multiplier=self.config.base_delay_seconds, exp_base=2
            ),
            retry=retry_if_exception(self.classifier.is_retryable),
            sleep=self._sleep,
            before_sleep=before_sleep,
            reraise=True,
        )

    async def run_model(
        self,
        model_id: str,
        prompt: str,
        request: TripRequest,
        log_prefix: str = "",
    ) -> ModelRunOutcome:
        """
        Try one model until it succeeds, fails for good, or runs out of retries.

        Never raises for attempt failures; the last failure is returned
        with its classification.
        """
        attempts = 0
        _log = f"{log_prefix}[model={model_id}] "

        async def one_attempt() -> GenerationResult:
            nonlocal attempts
            attempts += 1
            logger.info(
                f"{_log}Trying model (attempt {attempts}/{self.config.max_retries})"
            )
            return await self.attempt(model_id, prompt, request)

        try:
            result = await self._retrying(_log)(one_attempt)
        except Exception as e:
            classification = self.classifier.classify(e)
            logger.warning(
                f"{_log}Model failed after {attempts} attempt(s) | "
                f"kind={classification.kind.value}, fatal={classification.fatal}: {e}"
            )
            return ModelRunOutcome(
                model_id=model_id,
                attempts=attempts,
                error=e,
                classification=classification,
            )

        logger.info(f"{_log}Success after {attempts} attempt(s)")
        return ModelRunOutcome(model_id=model_id, attempts=attempts, result=result)
