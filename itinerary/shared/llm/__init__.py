"""Model client utilities."""

from itinerary.shared.llm.client import (
    ModelClient,
    OpenAIModelClient,
    ThreadedModelClient,
    EmptyResponseError,
    create_model_client,
)

__all__ = [
    "ModelClient",
    "OpenAIModelClient",
    "ThreadedModelClient",
    "EmptyResponseError",
    "create_model_client",
]
