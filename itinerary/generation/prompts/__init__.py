"""Prompt templates and builders for itinerary generation."""

from itinerary.generation.prompts.builders import (
    build_itinerary_prompt,
    build_language_instruction,
)

__all__ = ["build_itinerary_prompt", "build_language_instruction"]
