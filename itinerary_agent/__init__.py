"""
Itinerary Agent
===============
根据旅行参数调用 LLM 生成结构化多日行程

使用示例:
    from itinerary_agent import create_itinerary_generator, generate_itinerary
    from itinerary_agent import normalize_trip_request

    trip = normalize_trip_request({"destination": "Lisbon", "startDate": "2024-05-01",
                                   "endDate": "2024-05-03"})
    itinerary = await generate_itinerary(trip, create_itinerary_generator())
"""

from itinerary_agent.errors import (
    ItineraryError,
    UpstreamEmptyError,
    UpstreamFormatError,
    ValidationError,
)
from itinerary_agent.llm import create_itinerary_generator
from itinerary_agent.nodes import normalize_trip_request, repair_itinerary
from itinerary_agent.pipeline import generate_itinerary
from itinerary_agent.state import Itinerary, ItineraryDay, TimeBlock, TripRequest

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "ItineraryError",
    "ValidationError",
    "UpstreamEmptyError",
    "UpstreamFormatError",
    "create_itinerary_generator",
    "normalize_trip_request",
    "repair_itinerary",
    "generate_itinerary",
    "Itinerary",
    "ItineraryDay",
    "TimeBlock",
    "TripRequest",
]
