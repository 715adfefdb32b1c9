"""
Cascade graph construction.

Builds the graph that walks the model list in preference order:
    build_prompt -> try_model -> (try_model ...) -> complete -> END

Retries against a single model happen inside ``try_model``; the graph
only decides whether to advance to the next model.
"""

import logging
from typing import Any, Dict

from langgraph.graph import StateGraph, END

from itinerary.shared.logging import log_state_transition
from itinerary.generation.attempts import ModelAttemptRunner
from itinerary.generation.errors import ClassifiedError
from itinerary.generation.graph.router import route_after_attempt
from itinerary.generation.graph.state import CascadeState
from itinerary.generation.prompts import build_itinerary_prompt


logger = logging.getLogger(__name__)


def _build_prompt_node(state: CascadeState) -> Dict[str, Any]:
    request = state["request"]
    logger.info(
        f"[request={state.get('request_id')}] [graph=cascade] [node=build_prompt] "
        f"destination={request.destination}, duration={request.duration}d, "
        f"language={state['language']}"
    )
    return {"prompt": build_itinerary_prompt(request, state["language"])}


def _complete_node(state: CascadeState) -> Dict[str, Any]:
    if state.get("result") is not None:
        status = "success"
    elif state.get("fatal"):
        status = "aborted"
    else:
        status = "exhausted"
    log_state_transition(f"cascade_{status}", state)
    return {"status": status}


def create_cascade_graph(runner: ModelAttemptRunner):
    """
    Create and compile the cascade graph.

    The graph structure is:
        Entry -> build_prompt -> try_model -> route_after_attempt
          -> "try_model" -> try_model (next model)
          -> "complete"  -> complete -> END

    Args:
        runner: Attempt runner bound to a model client and configuration

    Returns:
        Compiled LangGraph application ready for execution.
    """

    async def try_model_node(state: CascadeState) -> Dict[str, Any]:
        index = state["model_index"]
        model_id = state["models"][index]
        _log = f"[request={state.get('request_id')}] [graph=cascade] [node=try_model] "

        outcome = await runner.run_model(
            model_id, state["prompt"], state["request"], log_prefix=_log
        )
        attempt_count = state["attempt_count"] + outcome.attempts

        if outcome.result is not None:
            return {"result": outcome.result, "attempt_count": attempt_count}

        classification = outcome.classification
        error = ClassifiedError(
            kind=classification.kind,
            message=str(outcome.error) or type(outcome.error).__name__,
            underlying_model=model_id,
            attempt_count=attempt_count,
        )
        update = {
            "error": error,
            "fatal": classification.fatal,
            "model_index": index + 1,
            "attempt_count": attempt_count,
        }
        log_state_transition(
            "model_failed",
            {**state, **update},
            extra={"model": model_id, "attempts": outcome.attempts},
        )
        return update

    graph = StateGraph(CascadeState)

    graph.add_node("build_prompt", _build_prompt_node)
    graph.add_node("try_model", try_model_node)
    graph.add_node("complete", _complete_node)

    graph.set_entry_point("build_prompt")
    graph.add_edge("build_prompt", "try_model")

    graph.add_conditional_edges(
        "try_model",
        route_after_attempt,
        {
            "try_model": "try_model",
            "complete": "complete",
        },
    )

    graph.add_edge("complete", END)

    return graph.compile()
