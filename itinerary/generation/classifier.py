"""
Failure classification for the model cascade.

Maps any failure surfaced during an attempt onto the ``ErrorKind``
taxonomy together with a retry decision. This is the only place that
inspects failure messages; the cascade acts on the ``Classification``.
"""

import asyncio
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple

from itinerary.generation.errors import ErrorKind, GenerationError


@dataclass(frozen=True)
class Classification:
    """
    Decision for one failed attempt.

    Attributes:
        kind: Taxonomy kind of the failure
        retryable: Whether the same model should be tried again
        move_to_next_model: Whether the cascade should advance when not retrying
    """

    kind: ErrorKind
    retryable: bool
    move_to_next_model: bool

    @property
    def fatal(self) -> bool:
        return not self.retryable and not self.move_to_next_model


@dataclass(frozen=True)
class ClassificationRule:
    """Case-insensitive substrings that identify one kind."""

    kind: ErrorKind
    patterns: Tuple[str, ...]

    def matches(self, message: str) -> bool:
        return any(pattern in message for pattern in self.patterns)


# Checked in order; first match wins.
DEFAULT_RULES: Tuple[ClassificationRule, ...] = (
    ClassificationRule(ErrorKind.AUTH, ("api key", "401")),
    ClassificationRule(ErrorKind.MODEL_UNAVAILABLE, ("not found", "404")),
    ClassificationRule(ErrorKind.TIMEOUT, ("timeout",)),
    ClassificationRule(
        ErrorKind.RATE_LIMIT,
        ("rate limit", "429", "503", "unavailable", "network"),
    ),
)

POLICY = {
    ErrorKind.TIMEOUT: (True, True),
    ErrorKind.RATE_LIMIT: (True, True),
    ErrorKind.MODEL_UNAVAILABLE: (False, True),
    ErrorKind.AUTH: (False, False),
    ErrorKind.PARSE: (False, True),
    ErrorKind.SCHEMA_MISMATCH: (False, True),
    ErrorKind.UNKNOWN: (False, True),
    ErrorKind.VALIDATION: (False, False),
}


class ErrorClassifier:
    """
    Classifies attempt failures.

    Failures that already know their kind (``GenerationError`` subclasses,
    ``TimeoutError``) are classified by type. Everything else is matched
    against ``rules`` by message.

    Args:
        rules: Ordered message rules. Defaults to ``DEFAULT_RULES``.
        extra_rules: Rules checked before ``rules``, for provider-specific
            messages.
    """

    def __init__(
        self,
        rules: Optional[Sequence[ClassificationRule]] = None,
        extra_rules: Iterable[ClassificationRule] = (),
    ):
        base = DEFAULT_RULES if rules is None else tuple(rules)
        self.rules: Tuple[ClassificationRule, ...] = tuple(extra_rules) + base

    def kind_of(self, error: BaseException) -> ErrorKind:
        if isinstance(error, GenerationError):
            return error.kind
        if isinstance(error, (TimeoutError, asyncio.TimeoutError)):
            return ErrorKind.TIMEOUT

        message = str(error).lower()
        for rule in self.rules:
            if rule.matches(message):
                return rule.kind
        return ErrorKind.UNKNOWN

    def classify(self, error: BaseException) -> Classification:
        kind = self.kind_of(error)
        retryable, move_to_next_model = POLICY[kind]
        return Classification(
            kind=kind,
            retryable=retryable,
            move_to_next_model=move_to_next_model,
        )

    def is_retryable(self, error: BaseException) -> bool:
        return self.classify(error).retryable
