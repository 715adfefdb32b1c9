"""
Structured logging configuration.

JSON-lines output for the service and structured events for cascade
state transitions.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional, TextIO, Union


class StructuredFormatter(logging.Formatter):
    """
    Formats each record as one JSON object.

    Keys: timestamp (UTC ISO 8601), level, logger, message, plus
    ``extra`` for cascade events and ``exception`` when exc_info is set.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_entry: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if hasattr(record, "extra"):
            log_entry["extra"] = record.extra

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        # Thai itinerary text stays readable in log files
        return json.dumps(log_entry, ensure_ascii=False, default=str)


def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[str] = None,
    logger_name: str = "itinerary",
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Send ``logger_name`` and its children to JSON-lines handlers.

    Args:
        level: Level as int or name ("DEBUG", "INFO", ...)
        log_file: Optional path to also write JSON lines to
        logger_name: Root of the logger hierarchy to configure
        stream: Console stream; stderr when omitted

    Returns:
        The configured logger. Existing handlers are replaced, so repeated
        calls do not duplicate output.
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(level)
    logger.propagate = False
    logger.handlers = []

    formatter = StructuredFormatter()
    handlers = [logging.StreamHandler(stream)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def log_state_transition(
    event: str,
    state: Dict[str, Any],
    extra: Optional[Dict[str, Any]] = None,
    logger: Optional[logging.Logger] = None,
) -> None:
    """
    Log a cascade state transition event.

    Args:
        event: Name of the event (e.g., "model_failed", "cascade_success")
        state: Current cascade state (key fields are extracted)
        extra: Additional context to include in the log
        logger: Logger instance to use. Defaults to "itinerary.cascade".
    """
    if logger is None:
        logger = logging.getLogger("itinerary.cascade")

    error = state.get("error")
    log_data: Dict[str, Any] = {
        "event": event,
        "state_summary": {
            "request_id": state.get("request_id"),
            "model_index": state.get("model_index"),
            "attempt_count": state.get("attempt_count"),
            "last_error_kind": error.kind.value if error is not None else None,
            "succeeded": state.get("result") is not None,
        },
    }
    if extra:
        log_data["extra"] = extra

    logger.info(f"State transition: {event}", extra={"extra": log_data})
