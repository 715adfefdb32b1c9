"""
Response parser for model output.

Recovers a JSON payload from raw model text: bare JSON, JSON inside
markdown code fences, or JSON surrounded by prose.
"""

import json
import logging
import re
from typing import Any, Iterator

from itinerary.generation.errors import ParseError


logger = logging.getLogger(__name__)

_LEADING_FENCE = re.compile(r"^```[a-zA-Z0-9_-]*\s*")
_TRAILING_FENCE = re.compile(r"\s*```$")


def strip_code_fence(raw_response: str) -> str:
    """Remove a surrounding ```json ... ``` (or bare ```) fence if present."""
    content = raw_response.strip()
    if content.startswith("```"):
        content = _LEADING_FENCE.sub("", content, count=1)
        content = _TRAILING_FENCE.sub("", content, count=1)
    return content.strip()


def iter_balanced_objects(text: str) -> Iterator[str]:
    """
    Yield balanced ``{...}`` substrings, earliest start first.

    Braces inside JSON string literals are ignored.
    """
    start = text.find("{")
    while start != -1:
        depth = 0
        in_string = False
        escaped = False
        for i in range(start, len(text)):
            char = text[i]
            if in_string:
                if escaped:
                    escaped = False
                elif char == "\\":
                    escaped = True
                elif char == '"':
                    in_string = False
                continue
            if char == '"':
                in_string = True
            elif char == "{":
                depth += 1
            elif char == "}":
                depth -= 1
                if depth == 0:
                    yield text[start : i + 1]
                    break
        start = text.find("{", start + 1)


def parse_model_response(raw_response: str) -> Any:
    """
    Parse raw model output into a JSON value.

    Args:
        raw_response: Text returned by the model

    Returns:
        The parsed JSON value

    Raises:
        ParseError: If no JSON payload can be recovered
    """
    content = strip_code_fence(raw_response)

    try:
        return json.loads(content)
    except json.JSONDecodeError:
        logger.debug("Direct JSON parse failed, scanning for an embedded object")

    for candidate in iter_balanced_objects(raw_response):
        try:
            return json.loads(candidate)
        except json.JSONDecodeError:
            continue

    preview = raw_response.strip()[:200]
    raise ParseError(f"No valid JSON found in model response: {preview!r}")
