"""
Routing logic for the cascade graph.

Decides whether another model should be tried after ``try_model`` ran.
"""

import logging
from typing import Literal

from itinerary.generation.graph.state import CascadeState


logger = logging.getLogger(__name__)


def route_after_attempt(state: CascadeState) -> Literal["try_model", "complete"]:
    """
    Determine the next step after a model has been tried.

    Routing logic:
    1. A result is present -> complete
    2. The last failure was fatal -> complete
    3. Every model has been tried -> complete
    4. Otherwise -> try the next model

    Args:
        state: Current cascade state

    Returns:
        Name of the next node to execute
    """
    request_id = state.get("request_id", "unknown")
    model_index = state.get("model_index", 0)
    total = len(state["models"])
    _log = f"[request={request_id}] [graph=cascade] [router=route_after_attempt] "

    if state.get("result") is not None:
        logger.info(f"{_log}Routing to 'complete' | outcome=success")
        return "complete"

    if state.get("fatal"):
        logger.info(f"{_log}Routing to 'complete' | outcome=fatal")
        return "complete"

    if model_index >= total:
        logger.info(
            f"{_log}Routing to 'complete' | outcome=exhausted, models_tried={total}"
        )
        return "complete"

    logger.info(
        f"{_log}Routing to 'try_model' | next={state['models'][model_index]} "
        f"({model_index + 1}/{total})"
    )
    return "try_model"
