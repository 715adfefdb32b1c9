"""Shared fixtures for the itinerary tests."""

from typing import Dict, List, Optional, Tuple

import pytest

from itinerary.generation import CascadeOrchestrator, get_config

from fakes import Outcome, RecordingSleep, ScriptedModelClient


@pytest.fixture
def sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def make_orchestrator(sleep):
    """Factory building an orchestrator over a scripted client."""

    def _make(
        script: Dict[str, List[Outcome]],
        models: Optional[List[str]] = None,
        **overrides,
    ) -> Tuple[CascadeOrchestrator, ScriptedModelClient]:
        client = ScriptedModelClient(script)
        config = get_config(models=models or list(script.keys()), **overrides)
        return CascadeOrchestrator(client, config, sleep=sleep), client

    return _make
