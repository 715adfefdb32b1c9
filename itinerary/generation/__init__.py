"""
Itinerary generation core.

Turns a trip request into a validated itinerary by calling a prioritized
list of models, retrying transient failures with exponential backoff and
classifying whatever failure ends the cascade.
"""

from itinerary.generation.classifier import (
    Classification,
    ClassificationRule,
    ErrorClassifier,
)
from itinerary.generation.config import (
    CascadeConfig,
    DEFAULT_CONFIG,
    get_config,
    load_config_from_env,
)
from itinerary.generation.errors import (
    ClassifiedError,
    ErrorKind,
    GenerationFailed,
    ModelTimeoutError,
    ParseError,
    SchemaMismatchError,
)
from itinerary.generation.orchestrator import CascadeOrchestrator, GenerationOutcome

__all__ = [
    "Classification",
    "ClassificationRule",
    "ErrorClassifier",
    "CascadeConfig",
    "DEFAULT_CONFIG",
    "get_config",
    "load_config_from_env",
    "ClassifiedError",
    "ErrorKind",
    "GenerationFailed",
    "ModelTimeoutError",
    "ParseError",
    "SchemaMismatchError",
    "CascadeOrchestrator",
    "GenerationOutcome",
]
