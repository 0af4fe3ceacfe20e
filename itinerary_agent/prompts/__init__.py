"""
Itinerary Agent Prompts
=======================
Prompt templates for the itinerary model call
"""

from itinerary_agent.prompts.itinerary import (
    ITINERARY_SYSTEM_PROMPT,
    build_system_prompt,
    build_user_payload,
)

__all__ = [
    "ITINERARY_SYSTEM_PROMPT",
    "build_system_prompt",
    "build_user_payload",
]
