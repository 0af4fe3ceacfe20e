"""
Test Factories
==============
Fake text generator and itinerary builders shared by the tests
"""

from typing import Any


class FakeTextGenerator:
    """Records every call and returns a fixed text (or raises a fixed error)"""

    def __init__(self, text: str = "", error: Exception | None = None) -> None:
        self.text = text
        self.error = error
        self.calls: list[tuple[str, str]] = []

    async def generate(self, system_prompt: str, user_payload: str) -> str:
        self.calls.append((system_prompt, user_payload))
        if self.error is not None:
            raise self.error
        return self.text


def make_block(time_of_day: str, title: str, cost: float = 10) -> dict[str, Any]:
    return {
        "timeOfDay": time_of_day,
        "title": title,
        "description": f"{title} description.",
        "estCost": cost,
        "mapQuery": f"{title}, Lisbon",
    }


def make_day(day: int, label: str, blocks: int = 3) -> dict[str, Any]:
    times = ["Morning", "Afternoon", "Evening", "Night", "Late night"]
    return {
        "day": day,
        "dateLabel": label,
        "blocks": [make_block(times[i], f"Stop {day}.{i + 1}") for i in range(blocks)],
    }
