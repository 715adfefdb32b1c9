"""
Model client implementations.

The generation cascade only needs ``invoke(model_id, prompt) -> text``.
``OpenAIModelClient`` provides it over any OpenAI-compatible endpoint
(Gemini by default); ``ThreadedModelClient`` adapts a blocking callable.
"""

import asyncio
import os
from typing import Callable, Optional, Protocol, runtime_checkable

from dotenv import load_dotenv
from openai import APIConnectionError, APITimeoutError, AsyncOpenAI

load_dotenv()

GEMINI_OPENAI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/openai/"


@runtime_checkable
class ModelClient(Protocol):
    """Capability to send one prompt to one model and get text back."""

    async def invoke(self, model_id: str, prompt: str) -> str:
        ...


class EmptyResponseError(Exception):
    """The model returned no text."""


class OpenAIModelClient:
    """
    Model client backed by ``openai.AsyncOpenAI``.

    SDK-level retries are disabled; retry policy belongs to the cascade.
    Timeout and connection failures are re-raised with messages the error
    classifier recognises.
    """

    def __init__(self, client: AsyncOpenAI):
        self._client = client

    async def invoke(self, model_id: str, prompt: str) -> str:
        try:
            response = await self._client.chat.completions.create(
                model=model_id,
                messages=[{"role": "user", "content": prompt}],
            )
        except APITimeoutError as e:
            raise TimeoutError(f"Request timeout from {model_id}: {e}") from e
        except APIConnectionError as e:
            raise ConnectionError(f"Network error calling {model_id}: {e}") from e

        if not response.choices:
            raise EmptyResponseError(f"Empty response from model {model_id}")
        content = response.choices[0].message.content
        if not content or not content.strip():
            raise EmptyResponseError(f"Empty response from model {model_id}")
        return content.strip()


class ThreadedModelClient:
    """
    Adapts a blocking ``invoke(model_id, prompt) -> str`` callable.

    Each call runs in a worker thread so the event loop is never blocked.
    """

    def __init__(self, invoke: Callable[[str, str], str]):
        self._invoke = invoke

    async def invoke(self, model_id: str, prompt: str) -> str:
        return await asyncio.to_thread(self._invoke, model_id, prompt)


def create_model_client(
    api_key: Optional[str] = None,
    base_url: Optional[str] = None,
) -> OpenAIModelClient:
    """
    Build an OpenAI-compatible model client from arguments or environment.

    Uses GEMINI_API_KEY (or GOOGLE_AI_API_KEY) and LLM_BASE_URL when the
    arguments are not given.

    Raises:
        ValueError: If no API key is available
    """
    api_key = api_key or os.environ.get("GEMINI_API_KEY") or os.environ.get(
        "GOOGLE_AI_API_KEY"
    )
    if not api_key:
        raise ValueError(
            "GEMINI_API_KEY environment variable is not set. "
            "Please set it to your Gemini API key."
        )
    base_url = base_url or os.environ.get("LLM_BASE_URL", GEMINI_OPENAI_BASE_URL)
    return OpenAIModelClient(
        AsyncOpenAI(api_key=api_key, base_url=base_url, max_retries=0)
    )
