"""
Tests for the itinerary prompt builder.
"""

import json

import pytest

from itinerary.shared.contracts import TripRequest
from itinerary.generation.prompts import (
    build_itinerary_prompt,
    build_language_instruction,
)
from itinerary.generation.prompts.templates import JSON_EXAMPLE


class TestLanguageInstruction:
    """Tests for build_language_instruction."""

    def test_thai(self):
        assert "ภาษาไทย" in build_language_instruction("th")

    def test_region_subtag_uses_primary_language(self):
        assert build_language_instruction("en-US") == build_language_instruction("en")
        assert "English" in build_language_instruction("en_GB")

    def test_unknown_tag_is_named(self):
        instruction = build_language_instruction("ja")
        assert '"ja"' in instruction


class TestBuildItineraryPrompt:
    """Tests for build_itinerary_prompt."""

    def test_contains_request_details(self):
        prompt = build_itinerary_prompt(
            TripRequest(destination="Kyoto", duration=4), "en"
        )
        assert "Kyoto" in prompt
        assert "4 days" in prompt
        assert "exactly 4 entries" in prompt

    def test_language_line_comes_first(self):
        prompt = build_itinerary_prompt(
            TripRequest(destination="Kyoto", duration=2), "th"
        )
        assert prompt.startswith(build_language_instruction("th"))

    def test_structural_minimums(self):
        prompt = build_itinerary_prompt(
            TripRequest(destination="Kyoto", duration=1), "en"
        )
        assert "1 day." in prompt
        assert "at least 3 activities" in prompt
        assert "at least 2 places" in prompt
        assert "at least 2 restaurants" in prompt
        assert "at least 1 special experience" in prompt

    def test_example_json_is_valid(self):
        prompt = build_itinerary_prompt(
            TripRequest(destination="Kyoto", duration=1), "en"
        )
        assert prompt.endswith(JSON_EXAMPLE)
        example = json.loads(JSON_EXAMPLE)
        assert set(example) == {"dailySchedules", "recommendations"}

    def test_is_deterministic(self):
        request = TripRequest(destination="Kyoto", duration=3)
        assert build_itinerary_prompt(request, "en") == build_itinerary_prompt(request, "en")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
