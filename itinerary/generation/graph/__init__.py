"""
Model cascade graph.

Walks the configured models in preference order until one produces a
valid itinerary, a fatal failure occurs, or the list is exhausted.
"""

from itinerary.generation.graph.build import create_cascade_graph

__all__ = ["create_cascade_graph"]
