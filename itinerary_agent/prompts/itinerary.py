"""
Itinerary Prompt - Structured Itinerary Generation
==================================================
System prompt and user payload for the itinerary request

The prompt pins the JSON shape, the number of days and the exact date labels so
the post-processor only has to truncate and overwrite.
"""

import json
import math
from typing import Any

from itinerary_agent.state import TripRequest

ITINERARY_SYSTEM_PROMPT = """You are an expert travel planner.
Return ONLY valid JSON (no markdown, no extra text).
The JSON must match EXACTLY this shape:
{{
  "destination": string,
  "summary": {{ "vibe": string, "tips": string[], "estTotalCost": number }},
  "days": Array<{{
    "day": number,
    "dateLabel": string,
    "blocks": Array<{{
      "timeOfDay": "Morning" | "Afternoon" | "Evening",
      "title": string,
      "description": string,
      "estCost": number,
      "mapQuery": string
    }}>
  }}>
}}
Rules:
- There must be exactly {days_count} days.
- Use these dateLabel values exactly: {date_labels}.
- Each day must have exactly 3 blocks: Morning, Afternoon, Evening (in that order).
- Titles should be short; descriptions 1-2 sentences.
- Make mapQuery specific for a maps search (place + city + neighborhood/landmark).
- Keep activities feasible and safe."""


def build_system_prompt(days_count: int, date_labels: list[str]) -> str:
    """Render the system prompt with the day count and labels embedded verbatim"""
    return ITINERARY_SYSTEM_PROMPT.format(
        days_count=days_count,
        date_labels=json.dumps(date_labels, ensure_ascii=False),
    )


def _json_number(value: int | float | None) -> int | float | None:
    # JSON has no NaN or Infinity
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


def build_user_payload(trip: TripRequest) -> str:
    """
    构建用户消息（JSON 文本）

    Args:
        trip: 规范化后的请求

    Returns:
        JSON 字符串，字段名与前端请求一致
    """
    payload: dict[str, Any] = {
        "destination": trip.destination,
        "startDate": trip.start_date,
        "endDate": trip.end_date,
        "daysCount": trip.days_count,
        "dateLabels": trip.date_labels,
        "travelers": _json_number(trip.travelers),
        "budget": _json_number(trip.budget),
        "interests": trip.interests,
    }
    return json.dumps(payload, ensure_ascii=False)
