"""
Shared Test Fixtures
====================
Canned model outputs and request payloads
"""

import json
from typing import Any

import pytest

from tests.factories import FakeTextGenerator, make_day


@pytest.fixture
def sample_itinerary() -> dict[str, Any]:
    """Model output for a 3-day Lisbon trip (well-formed)"""
    return {
        "destination": "Lisbon, Portugal",
        "summary": {
            "vibe": "relaxed food-and-history weekend",
            "tips": ["Buy a Viva Viagem card", "Wear comfortable shoes"],
            "estTotalCost": 450,
        },
        "days": [
            make_day(1, "2024-05-01"),
            make_day(2, "2024-05-02"),
            make_day(3, "2024-05-03"),
        ],
    }


@pytest.fixture
def canned_itinerary() -> dict[str, Any]:
    """The development stub's single-block itinerary"""
    return {
        "destination": "Debug City",
        "summary": {"vibe": "test trip", "tips": ["This is a stub response"], "estTotalCost": 0},
        "days": [
            {
                "day": 1,
                "dateLabel": "Day 1",
                "blocks": [
                    {
                        "timeOfDay": "Morning",
                        "title": "Stub activity",
                        "description": "Placeholder block from the debug endpoint.",
                        "estCost": 0,
                        "mapQuery": "City center",
                    }
                ],
            }
        ],
    }


@pytest.fixture
def valid_payload() -> dict[str, Any]:
    return {
        "destination": "  Lisbon ",
        "startDate": "2024-05-01",
        "endDate": "2024-05-03",
        "travelers": 2,
        "budget": 1500,
        "interests": ["Food", "History"],
    }


@pytest.fixture
def fake_generator(sample_itinerary) -> FakeTextGenerator:
    return FakeTextGenerator(json.dumps(sample_itinerary))
