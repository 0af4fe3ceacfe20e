"""
Itinerary Agent Nodes
=====================
Request normalization and itinerary post-processing steps
"""

from itinerary_agent.nodes.normalizer import (
    build_date_labels,
    count_days_inclusive,
    normalize_trip_request,
)
from itinerary_agent.nodes.postprocessor import parse_itinerary_text, repair_itinerary

__all__ = [
    "normalize_trip_request",
    "count_days_inclusive",
    "build_date_labels",
    "parse_itinerary_text",
    "repair_itinerary",
]
