"""
Configuration for the generation cascade.

Centralizes the model preference order, retry policy and deadline so they
are fixed when the orchestrator is built, not passed per call.
"""

import os
from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple

from dotenv import load_dotenv


# Fastest stable first, then more capable models
DEFAULT_MODELS: Tuple[str, ...] = (
    "gemini-2.5-flash",
    "gemini-2.5-pro",
    "gemini-1.5-pro",
    "gemini-1.5-flash",
)


@dataclass(frozen=True)
class CascadeConfig:
    """
    Configuration for the model cascade.

    Attributes:
        models: Model ids in preference order
        max_retries: Attempts per model (including the first)
        base_delay_ms: Backoff before the second attempt; doubles each retry
        timeout_ms: Deadline for a single model call
        default_language: Language tag used when a request names none
    """

    models: Tuple[str, ...] = field(default=DEFAULT_MODELS)
    max_retries: int = 3
    base_delay_ms: int = 1000
    timeout_ms: int = 45000
    default_language: str = "th"

    def __post_init__(self):
        if isinstance(self.models, str):
            raise ValueError("models must be a sequence of model ids, not a string")
        object.__setattr__(self, "models", tuple(self.models))
        if not self.models:
            raise ValueError("At least one model id is required")
        for name in ("max_retries", "base_delay_ms", "timeout_ms"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")

    @property
    def base_delay_seconds(self) -> float:
        return self.base_delay_ms / 1000

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000

    @property
    def recursion_limit(self) -> int:
        # build_prompt + one try_model step per model + complete, with headroom
        return len(self.models) + 5


# Default configuration instance
DEFAULT_CONFIG = CascadeConfig()


def get_config(
    models: Optional[Sequence[str]] = None,
    max_retries: Optional[int] = None,
    base_delay_ms: Optional[int] = None,
    timeout_ms: Optional[int] = None,
    default_language: Optional[str] = None,
) -> CascadeConfig:
    """
    Create a configuration with optional overrides.

    Returns:
        CascadeConfig with specified overrides applied
    """
    return CascadeConfig(
        models=models if models is not None else DEFAULT_CONFIG.models,
        max_retries=max_retries
        if max_retries is not None
        else DEFAULT_CONFIG.max_retries,
        base_delay_ms=base_delay_ms
        if base_delay_ms is not None
        else DEFAULT_CONFIG.base_delay_ms,
        timeout_ms=timeout_ms if timeout_ms is not None else DEFAULT_CONFIG.timeout_ms,
        default_language=default_language or DEFAULT_CONFIG.default_language,
    )


def _int_env(name: str) -> Optional[int]:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def load_config_from_env() -> CascadeConfig:
    """
    Build a configuration from environment variables (and .env).

    Reads ITINERARY_MODELS (comma separated), ITINERARY_MAX_RETRIES,
    ITINERARY_BASE_DELAY_MS, ITINERARY_TIMEOUT_MS and ITINERARY_LANGUAGE.
    Unset variables keep their defaults.
    """
    load_dotenv()

    models = None
    raw_models = os.environ.get("ITINERARY_MODELS")
    if raw_models:
        models = [m.strip() for m in raw_models.split(",") if m.strip()]

    return get_config(
        models=models,
        max_retries=_int_env("ITINERARY_MAX_RETRIES"),
        base_delay_ms=_int_env("ITINERARY_BASE_DELAY_MS"),
        timeout_ms=_int_env("ITINERARY_TIMEOUT_MS"),
        default_language=os.environ.get("ITINERARY_LANGUAGE"),
    )
