"""
Itinerary Renderer
==================
Markdown rendering of an itinerary, laid out like the web planner page:
summary line, estimated total, quick tips, then one section per day.

Map links are plain URL templates; nothing here resolves a location.
"""

import os
from typing import Any
from urllib.parse import quote

from itinerary_agent.state import Itinerary

DEFAULT_MAPS_SEARCH_URL = "https://www.google.com/maps/search/?api=1&query="


def build_map_search_url(map_query: str) -> str:
    """
    构建地图搜索链接

    Args:
        map_query: 模型给出的地点描述（原样编码）

    Returns:
        MAPS_SEARCH_URL（默认 Google Maps 搜索）+ URL 编码后的查询
    """
    base_url = os.getenv("MAPS_SEARCH_URL") or DEFAULT_MAPS_SEARCH_URL
    return base_url + quote(map_query, safe="-_.!~*'()")


def _format_cost(value: float) -> str:
    return f"{value:,.0f}" if float(value).is_integer() else f"{value:,.2f}"


def render_itinerary_markdown(itinerary: Itinerary | dict[str, Any]) -> str:
    """
    渲染行程为 Markdown

    Args:
        itinerary: Itinerary 或修正后的行程 dict

    Returns:
        Markdown 文本
    """
    if not isinstance(itinerary, Itinerary):
        itinerary = Itinerary.model_validate(itinerary)

    summary = itinerary.summary
    lines = [f"# {itinerary.destination}", ""]

    if summary.vibe:
        lines.append(f"A {summary.vibe} for {itinerary.destination}.")
    lines.append(f"Est. total: ${_format_cost(summary.estTotalCost)}")

    if summary.tips:
        lines += ["", "### Quick tips", ""]
        lines += [f"- {tip}" for tip in summary.tips]

    for day in itinerary.days:
        lines += ["", f"## Day {day.day} - {day.dateLabel}"]
        for block in day.blocks:
            lines += [
                "",
                f"**{block.timeOfDay}: {block.title}** (~${_format_cost(block.estCost)}/person)",
                "",
            ]
            if block.description:
                lines.append(block.description)
            lines.append(f"[Open map]({build_map_search_url(block.mapQuery)})")

    return "\n".join(lines) + "\n"
