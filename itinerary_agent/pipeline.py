"""
Itinerary Pipeline
==================
One request, one model call:

    normalize -> build prompt -> generate -> parse -> repair

Normalization runs in the caller (the API route) so validation errors are
raised before a generator is even created.
"""

import logging
from typing import Any

from itinerary_agent.errors import UpstreamEmptyError
from itinerary_agent.llm.generator import TextGenerator
from itinerary_agent.nodes.postprocessor import parse_itinerary_text, repair_itinerary
from itinerary_agent.prompts.itinerary import build_system_prompt, build_user_payload
from itinerary_agent.state import TripRequest

logger = logging.getLogger(__name__)


async def generate_itinerary(trip: TripRequest, generator: TextGenerator) -> dict[str, Any]:
    """
    生成并修正行程

    Args:
        trip: 规范化后的请求（normalize_trip_request 的结果）
        generator: 文本生成器

    Returns:
        修正后的行程 dict

    Raises:
        UpstreamEmptyError: 模型没有返回文本
        UpstreamFormatError: 模型返回的不是 JSON 对象
    """
    logger.info(f"Generating itinerary: destination={trip.destination}, days={trip.days_count}")

    system_prompt = build_system_prompt(trip.days_count, trip.date_labels)
    user_payload = build_user_payload(trip)

    raw = await generator.generate(system_prompt, user_payload)
    if not raw:
        raise UpstreamEmptyError("model returned no text")

    itinerary = parse_itinerary_text(raw)
    return repair_itinerary(
        itinerary,
        destination=trip.destination,
        days_count=trip.days_count,
        date_labels=trip.date_labels,
    )
