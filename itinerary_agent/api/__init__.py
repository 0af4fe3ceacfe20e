"""
Itinerary Agent API
===================
FastAPI 接口层

Endpoints:
- GET /health - 健康检查
- POST /api/itinerary - 行程生成接口
"""

from itinerary_agent.api.main import app, create_app

__all__ = ["app", "create_app"]
