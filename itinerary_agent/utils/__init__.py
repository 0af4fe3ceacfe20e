"""
Itinerary Utilities
===================
工具模块
"""

from itinerary_agent.utils.render import build_map_search_url, render_itinerary_markdown

__all__ = [
    "build_map_search_url",
    "render_itinerary_markdown",
]
