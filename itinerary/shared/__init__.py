"""
Shared infrastructure for the itinerary service.

Modules:
- llm: Model client capability and implementations
- logging: Structured JSON logging
- contracts: Trip request and itinerary contracts
"""

from itinerary.shared.llm.client import create_model_client
from itinerary.shared.logging.config import setup_logging, log_state_transition

__all__ = [
    "create_model_client",
    "setup_logging",
    "log_state_transition",
]
