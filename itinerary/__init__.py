"""
Itinerary generation service.

This package contains:
- shared/: Common infrastructure (model client, logging, contracts)
- generation/: Model cascade that produces validated itineraries
- main.py: FastAPI application
"""

from itinerary.generation import CascadeOrchestrator

__all__ = ["CascadeOrchestrator"]
