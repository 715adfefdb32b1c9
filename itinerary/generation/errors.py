"""
Error taxonomy for itinerary generation.

Internal failures are raised as ``GenerationError`` subclasses that carry
their ``ErrorKind``. The cascade never lets them escape: they are
classified into a single ``ClassifiedError`` value for the caller.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ErrorKind(str, Enum):
    """Closed set of failure kinds a caller can receive."""

    VALIDATION = "validation"
    TIMEOUT = "timeout"
    RATE_LIMIT = "rate_limit"
    MODEL_UNAVAILABLE = "model_unavailable"
    AUTH = "auth"
    PARSE = "parse"
    SCHEMA_MISMATCH = "schema_mismatch"
    UNKNOWN = "unknown"


USER_MESSAGES = {
    ErrorKind.VALIDATION: "The trip request is invalid.",
    ErrorKind.TIMEOUT: "Generating the itinerary took too long. Please try again.",
    ErrorKind.RATE_LIMIT: "The service is busy right now. Please wait a moment and retry.",
    ErrorKind.MODEL_UNAVAILABLE: "The AI model is currently unavailable.",
    ErrorKind.AUTH: "The AI service could not be reached with the configured credentials.",
    ErrorKind.PARSE: "The AI returned a response that could not be read.",
    ErrorKind.SCHEMA_MISMATCH: "The AI returned an itinerary in an unexpected shape.",
    ErrorKind.UNKNOWN: "Something went wrong while generating the itinerary. Please try again.",
}


class GenerationError(Exception):
    """Base for failures raised inside a generation attempt."""

    kind: ErrorKind = ErrorKind.UNKNOWN


class ModelTimeoutError(GenerationError):
    """A model call did not finish before its deadline."""

    kind = ErrorKind.TIMEOUT


class ParseError(GenerationError):
    """No JSON payload could be recovered from the model output."""

    kind = ErrorKind.PARSE


class SchemaMismatchError(GenerationError):
    """Parsed output does not match the itinerary contract."""

    kind = ErrorKind.SCHEMA_MISMATCH


class ClassifiedError(BaseModel):
    """Terminal failure returned once the cascade gives up."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    kind: ErrorKind
    message: str
    underlying_model: Optional[str] = Field(
        default=None, description="Model that produced the failure, if any"
    )
    attempt_count: int = Field(ge=0, description="Model calls made in total")

    @property
    def user_message(self) -> str:
        return USER_MESSAGES[self.kind]


class GenerationFailed(Exception):
    """Raised by ``CascadeOrchestrator.generate`` with the classified error."""

    def __init__(self, error: ClassifiedError):
        super().__init__(f"{error.kind.value}: {error.message}")
        self.error = error
